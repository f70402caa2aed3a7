"""
Statistics Data Models

Contains the cross-round session statistics and their summary.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from .game import RoundOutcome

TOP_WORDS: int = 5

_COUNTERS = ('total_rounds', 'successful_games', 'attempts')


@dataclass
class StatsSummary:
    """Aggregated view printed at the end of a session."""
    total_rounds: int
    successful_games: int
    attempts: int
    average_attempts: float
    top_words: List[Tuple[str, int]]


@dataclass
class SessionStats:
    """
    Counters persisted between sessions.

    total_rounds counts rounds whose answer was confirmed, attempts sums the
    accepted guesses of every finished round, and used_words tallies every
    accepted guess.
    """
    total_rounds: int = 0
    successful_games: int = 0
    attempts: int = 0
    used_words: Dict[str, int] = field(default_factory=dict)

    def begin_round(self) -> None:
        self.total_rounds += 1

    def record_round(self, outcome: RoundOutcome, attempts_this_round: int) -> None:
        self.attempts += attempts_this_round
        if outcome.won:
            self.successful_games += 1

    def record_guess(self, word: str) -> None:
        self.used_words[word] = self.used_words.get(word, 0) + 1

    def most_frequent_words(self, top_n: int = TOP_WORDS) -> List[Tuple[str, int]]:
        """Highest counts first, ties broken alphabetically."""
        ranked = sorted(self.used_words.items(), key=lambda item: (-item[1], item[0]))
        return ranked[:top_n]

    def summary(self, top_n: int = TOP_WORDS) -> StatsSummary:
        average = self.attempts / self.successful_games if self.successful_games else 0.0
        return StatsSummary(
            total_rounds=self.total_rounds,
            successful_games=self.successful_games,
            attempts=self.attempts,
            average_attempts=average,
            top_words=self.most_frequent_words(top_n)
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'total_rounds': self.total_rounds,
            'successful_games': self.successful_games,
            'attempts': self.attempts,
            'used_words': dict(self.used_words)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SessionStats':
        """
        Build stats from a persisted record.

        Raises:
            ValueError: If a field is missing, negative or inconsistent
            TypeError: If a field has the wrong type
        """
        if not isinstance(data, dict):
            raise TypeError("Stats record must be an object")

        for name in _COUNTERS:
            if name not in data:
                raise ValueError(f"Stats record is missing '{name}'")
            value = data[name]
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"'{name}' must be an integer")
            if value < 0:
                raise ValueError(f"'{name}' cannot be negative")

        if data['successful_games'] > data['total_rounds']:
            raise ValueError("'successful_games' cannot exceed 'total_rounds'")

        used_words = data.get('used_words', {})
        if not isinstance(used_words, dict):
            raise TypeError("'used_words' must be an object")
        for word, count in used_words.items():
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                raise ValueError(f"Invalid count for word '{word}'")

        return cls(
            total_rounds=data['total_rounds'],
            successful_games=data['successful_games'],
            attempts=data['attempts'],
            used_words=dict(used_words)
        )
