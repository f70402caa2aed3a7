"""
Services Package

Contains all business logic and service classes.
"""

from .feedback_service import score
from .hard_mode_service import HardModeValidator
from .round_service import RoundController
from .stats_service import load_session_stats, save_session_stats
from .word_service import AnswerPicker, WordSets, resolve_seed

__all__ = [
    'score',
    'HardModeValidator',
    'RoundController',
    'load_session_stats', 'save_session_stats',
    'AnswerPicker', 'WordSets', 'resolve_seed'
]
