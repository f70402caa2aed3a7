"""
Utilities Package

Contains terminal I/O, helper functions and the game logger.
"""

from .helpers import normalize_word, is_yes
from .game_logger import game_logger
from .terminal import Console, render_plain, render_colored

__all__ = ['normalize_word', 'is_yes', 'game_logger', 'Console', 'render_plain', 'render_colored']
