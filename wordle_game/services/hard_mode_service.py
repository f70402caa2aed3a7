"""
Hard Mode Service

Keeps the letters revealed during a round and checks that new guesses
honour them.
"""

from typing import Optional, Tuple

from ..models.game import Feedback, HardModeConstraints, LetterVerdict


class HardModeValidator:
    """
    Round-scoped constraint checker.

    Pinned positions never change once set and the present-letter set only
    grows; a new round needs a new validator.
    """

    def __init__(self, constraints: Optional[HardModeConstraints] = None):
        self.constraints = constraints if constraints is not None else HardModeConstraints()

    @property
    def pinned(self):
        return list(self.constraints.pinned)

    @property
    def present(self):
        return set(self.constraints.present)

    def validate(self, guess: str) -> Tuple[bool, str]:
        """
        Checks a guess against everything revealed so far.

        Returns:
            Tuple of (is_valid, error_message)
        """
        for position, letter in enumerate(self.constraints.pinned):
            if letter is not None and guess[position] != letter:
                return False, (
                    f"Invalid guess in hard mode. Position {position + 1} must be '{letter}'."
                )

        missing = sorted(letter for letter in self.constraints.present if letter not in guess)
        if missing:
            return False, (
                f"Invalid guess in hard mode. Guess must contain {', '.join(missing)}."
            )

        return True, ""

    def update(self, feedback: Feedback) -> None:
        """Absorbs the verdicts of an accepted guess."""
        for position, (letter, verdict) in enumerate(zip(feedback.guess, feedback.verdicts)):
            if verdict == LetterVerdict.CORRECT:
                pinned = self.constraints.pinned[position]
                if pinned is not None and pinned != letter:
                    raise ValueError(
                        f"Position {position + 1} is already pinned to '{pinned}'"
                    )
                self.constraints.pinned[position] = letter
            elif verdict == LetterVerdict.PRESENT:
                self.constraints.present.add(letter)
