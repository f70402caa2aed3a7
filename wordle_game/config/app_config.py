"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Persistence Settings
    STATE_FILE = os.getenv('STATE_FILE', 'game_state.json')

    # Word List Settings (empty means the bundled lists)
    ACCEPTABLE_WORDS_FILE = os.getenv('ACCEPTABLE_WORDS_FILE', '')
    FINAL_WORDS_FILE = os.getenv('FINAL_WORDS_FILE', '')

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')
