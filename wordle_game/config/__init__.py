"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: environment-based settings (paths, logging)
- game_settings.py: game rules, constants and word list loading
"""

from .app_config import Config
from .game_settings import (
    WORD_LENGTH, MAX_ATTEMPTS, ACCEPTABLE_WORDS_PATH, FINAL_WORDS_PATH,
    load_word_list, validate_word_list_integrity
)

__all__ = [
    # App configuration
    'Config',
    # Game rules
    'WORD_LENGTH', 'MAX_ATTEMPTS', 'ACCEPTABLE_WORDS_PATH', 'FINAL_WORDS_PATH',
    'load_word_list', 'validate_word_list_integrity'
]
