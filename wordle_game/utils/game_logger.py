"""
Game Logger Module for the Wordle terminal game

This module provides structured logging for player actions and game events.
Every entry is written as one JSON document per line to a dated log file,
while only warnings and errors reach the console.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config import Config


class GameLogger:
    """
    Centralized logging system for Wordle sessions.

    Features:
    - Player action tracking (answers, guesses, prompts answered)
    - Game event logging (rounds started, won, lost, stats persisted)
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: str = Config.LOG_DIR, level: str = Config.LOG_LEVEL):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = logging.getLevelName(level.upper())
        if not isinstance(self.level, int):
            self.level = logging.INFO
        self.player = 'unknown'

        # Setup main game logger
        self.logger = self._setup_logger()

    @property
    def log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self) -> logging.Logger:
        """Setup the main game logger with file handler."""
        logger = logging.getLogger('wordle_game')
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        if logger.handlers:
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

        # File handler for detailed logs
        file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
        file_handler.setLevel(self.level)

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)

        file_formatter = logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_formatter = logging.Formatter(
            '%(levelname)s: %(message)s'
        )

        file_handler.setFormatter(file_formatter)
        console_handler.setFormatter(console_formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        return logger

    def set_player(self, name: str) -> None:
        """Attach a player name to every following entry."""
        self.player = name or 'unknown'

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'player': self.player,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False)

    def log_player_action(self,
                          action: str,
                          round_number: Optional[int] = None,
                          **kwargs):
        """
        Log player input that the session acted on.

        Args:
            action: Type of action (e.g., 'submit_answer', 'submit_guess', 'choose_hard_mode')
            round_number: Session round the action belongs to, if any
            **kwargs: Additional details to log
        """
        details = {
            'round': round_number,
            **kwargs
        }
        self.logger.info(self._create_log_entry('PLAYER_ACTION', action, details))

    def log_game_event(self,
                       event: str,
                       round_number: Optional[int] = None,
                       **kwargs):
        """
        Log game-specific events (wins, losses, etc.).

        Args:
            event: Type of game event (e.g., 'round_started', 'round_won', 'stats_saved')
            round_number: Session round the event belongs to, if any
            **kwargs: Additional game details
        """
        details = {
            'round': round_number,
            **kwargs
        }
        self.logger.info(self._create_log_entry('GAME_EVENT', event, details))

    def log_error(self,
                  error: Exception,
                  action: str,
                  round_number: Optional[int] = None):
        """
        Log errors with full context.

        Args:
            error: Exception that occurred
            action: Action that was being performed
            round_number: Session round, if any
        """
        details = {
            'round': round_number,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }
        self.logger.error(self._create_log_entry('ERROR', action, details))

    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about today's logged events."""
        log_file = self.log_file
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        for handler in self.logger.handlers:
            handler.flush()

        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
            'player_actions': 0,
            'game_events': 0,
            'errors': 0
        }

        with open(log_file, 'r', encoding='utf-8') as f:
            for line in f:
                if line.strip():
                    stats['total_entries'] += 1
                    if '"PLAYER_ACTION"' in line:
                        stats['player_actions'] += 1
                    elif '"GAME_EVENT"' in line:
                        stats['game_events'] += 1
                    elif '"ERROR"' in line:
                        stats['errors'] += 1

        return stats


# Global logger instance
game_logger = GameLogger()
