"""
Round Service

Drives the attempt loop of a single round.
"""

import logging
from typing import List, Optional, Tuple

from ..config.game_settings import MAX_ATTEMPTS, WORD_LENGTH
from ..models.game import Feedback, GuessResult, RoundOutcome, RoundStatus
from ..models.stats import SessionStats
from ..utils.helpers import normalize_word
from .feedback_service import score
from .hard_mode_service import HardModeValidator
from .word_service import WordSets

logger = logging.getLogger(__name__)

INVALID_WORD_MESSAGE = "Invalid guess. Please enter a 5-letter word from the word list."
INVALID_ANSWER_MESSAGE = "The answer word must be a valid 5-letter word from the word list."


class RoundController:
    """
    One round from answer selection to a WON or LOST outcome.

    This class handles:
    - Answer confirmation, counting the round in the session stats
    - Guess validation (dictionary membership and hard mode)
    - Scoring, attempt counting and the word tally
    - Reporting the outcome to the session stats exactly once
    """

    def __init__(self,
                 word_sets: WordSets,
                 stats: SessionStats,
                 hard_mode: bool = False,
                 max_attempts: int = MAX_ATTEMPTS):
        self.word_sets = word_sets
        self.stats = stats
        self.hard_mode = hard_mode
        self.max_attempts = max_attempts

        self.status = RoundStatus.AWAITING_ANSWER
        self.answer: Optional[str] = None
        self.attempts = 0
        self.history: List[Feedback] = []
        self.outcome: Optional[RoundOutcome] = None
        self.validator = HardModeValidator()

    @property
    def finished(self) -> bool:
        return self.status.terminal

    @property
    def attempts_left(self) -> int:
        return self.max_attempts - self.attempts

    def confirm_answer(self, word: str) -> Tuple[bool, str]:
        """
        Sets the hidden answer if it is an acceptable word.

        Returns:
            Tuple of (is_valid, error_message)
        """
        if self.status != RoundStatus.AWAITING_ANSWER:
            return False, "Answer word has already been set"

        answer = normalize_word(word)
        if not self.word_sets.is_acceptable(answer):
            return False, INVALID_ANSWER_MESSAGE

        self.answer = answer
        self.status = RoundStatus.AWAITING_GUESS
        self.stats.begin_round()
        logger.debug("Answer entered: %s", answer)
        return True, ""

    def set_hard_mode(self, enabled: bool) -> None:
        if self.attempts:
            raise RuntimeError("Hard mode cannot change after the first accepted guess")
        self.hard_mode = enabled

    def validate_guess(self, word: str) -> Tuple[bool, str]:
        """
        Validates a guess for the current round.

        Returns:
            Tuple of (is_valid, error_message)
        """
        if self.status == RoundStatus.AWAITING_ANSWER:
            return False, "Answer word has not been set"

        if self.finished:
            return False, "Round is already over"

        guess = normalize_word(word)
        if len(guess) != WORD_LENGTH or not self.word_sets.is_acceptable(guess):
            return False, INVALID_WORD_MESSAGE

        if self.hard_mode:
            return self.validator.validate(guess)

        return True, ""

    def submit_guess(self, word: str) -> GuessResult:
        """
        Processes a guess and updates round state.

        Rejected guesses cost no attempt and leave the round unchanged.
        """
        is_valid, error = self.validate_guess(word)
        if not is_valid:
            return GuessResult(accepted=False, status=self.status, error=error, attempt=self.attempts)

        guess = normalize_word(word)
        feedback = score(guess, self.answer)
        self.validator.update(feedback)
        self.attempts += 1
        self.history.append(feedback)
        self.stats.record_guess(guess)

        if guess == self.answer:
            self._finish(RoundStatus.WON)
        elif self.attempts >= self.max_attempts:
            self._finish(RoundStatus.LOST)

        return GuessResult(accepted=True, status=self.status, feedback=feedback, attempt=self.attempts)

    def abandon(self) -> Optional[RoundOutcome]:
        """Ends an unfinished round as a loss with the attempts used so far."""
        if self.status == RoundStatus.AWAITING_GUESS:
            self._finish(RoundStatus.LOST)
        return self.outcome

    def _finish(self, status: RoundStatus) -> None:
        self.status = status
        self.outcome = RoundOutcome(won=status == RoundStatus.WON, attempts=self.attempts)
        self.stats.record_round(self.outcome, self.attempts)
