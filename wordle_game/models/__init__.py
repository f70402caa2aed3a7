"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    Feedback, GuessResult, HardModeConstraints, LetterVerdict, RoundOutcome, RoundStatus
)
from .stats import SessionStats, StatsSummary

__all__ = [
    'Feedback', 'GuessResult', 'HardModeConstraints', 'LetterVerdict',
    'RoundOutcome', 'RoundStatus', 'SessionStats', 'StatsSummary'
]
