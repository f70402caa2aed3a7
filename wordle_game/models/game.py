"""
Game Data Models

Contains all round-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set, Tuple

from ..config.game_settings import WORD_LENGTH


class LetterVerdict(Enum):
    """Per-position classification of a guess letter against the answer."""
    CORRECT = "CORRECT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"


class RoundStatus(Enum):
    """Lifecycle of a single round."""
    AWAITING_ANSWER = "AWAITING_ANSWER"
    AWAITING_GUESS = "AWAITING_GUESS"
    WON = "WON"
    LOST = "LOST"

    @property
    def terminal(self) -> bool:
        return self in (RoundStatus.WON, RoundStatus.LOST)


@dataclass(frozen=True)
class Feedback:
    """Scored guess: one verdict per guess position."""
    guess: str
    verdicts: Tuple[LetterVerdict, ...]

    def __len__(self) -> int:
        return len(self.verdicts)

    @property
    def solved(self) -> bool:
        return all(verdict == LetterVerdict.CORRECT for verdict in self.verdicts)

    def count(self, verdict: LetterVerdict) -> int:
        return sum(1 for v in self.verdicts if v == verdict)


@dataclass(frozen=True)
class RoundOutcome:
    """Result of a finished round, produced exactly once."""
    won: bool
    attempts: int


@dataclass(frozen=True)
class GuessResult:
    """What the caller learns after submitting a guess."""
    accepted: bool
    status: RoundStatus
    error: str = ""
    feedback: Optional[Feedback] = None
    attempt: int = 0


@dataclass
class HardModeConstraints:
    """Information revealed so far in a round."""
    pinned: List[Optional[str]] = field(default_factory=lambda: [None] * WORD_LENGTH)
    present: Set[str] = field(default_factory=set)
