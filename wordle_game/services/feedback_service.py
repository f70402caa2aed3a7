"""
Feedback Service

Implements the Wordle letter evaluation algorithm.
"""

from typing import List, Optional

from ..models.game import Feedback, LetterVerdict


def score(guess: str, answer: str) -> Feedback:
    """
    Classify every guess letter against the answer.

    Exact matches are resolved first and consume their answer letter, then
    the remaining guess letters claim the leftmost unconsumed occurrence of
    the same letter. A letter guessed more often than it occurs in the
    answer is therefore marked ABSENT on the surplus positions.

    Raises:
        ValueError: If guess and answer differ in length
    """
    if len(guess) != len(answer):
        raise ValueError(
            f"Guess '{guess}' and answer '{answer}' must have the same length"
        )

    # Working copy of the answer; None marks a consumed letter
    answer_chars: List[Optional[str]] = list(answer)
    verdicts: List[Optional[LetterVerdict]] = [None] * len(guess)

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if letter == answer_chars[i]:
            verdicts[i] = LetterVerdict.CORRECT
            answer_chars[i] = None

    # Second pass: displaced letters and misses
    for i, letter in enumerate(guess):
        if verdicts[i] is not None:
            continue
        if letter in answer_chars:
            verdicts[i] = LetterVerdict.PRESENT
            answer_chars[answer_chars.index(letter)] = None
        else:
            verdicts[i] = LetterVerdict.ABSENT

    return Feedback(guess=guess, verdicts=tuple(verdicts))
