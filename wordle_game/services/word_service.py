"""
Word Service

Holds the acceptable and final word sets and picks answers from them.
"""

import logging
import random
from typing import FrozenSet, Iterable, Optional, Tuple

from ..config import Config
from ..config.game_settings import (
    ACCEPTABLE_WORDS_PATH, FINAL_WORDS_PATH, load_word_list, validate_word_list_integrity
)

logger = logging.getLogger(__name__)

SEED_BITS: int = 64


class WordSets:
    """
    Immutable pair of word collections.

    Final keeps its load order so that seeded selection is reproducible.
    """

    def __init__(self, acceptable: Iterable[str], final: Iterable[str]):
        acceptable_words = [word.upper() for word in acceptable]
        final_words = [word.upper() for word in final]
        validate_word_list_integrity(acceptable_words, final_words)
        if not final_words:
            raise ValueError("Final word list cannot be empty")

        self.acceptable: FrozenSet[str] = frozenset(acceptable_words)
        self.final: FrozenSet[str] = frozenset(final_words)
        self.final_words: Tuple[str, ...] = tuple(final_words)

    @classmethod
    def from_files(cls,
                   acceptable_path: Optional[str] = None,
                   final_path: Optional[str] = None) -> 'WordSets':
        """Load both lists, defaulting to the configured or bundled files."""
        acceptable_path = acceptable_path or Config.ACCEPTABLE_WORDS_FILE or ACCEPTABLE_WORDS_PATH
        final_path = final_path or Config.FINAL_WORDS_FILE or FINAL_WORDS_PATH
        word_sets = cls(load_word_list(acceptable_path), load_word_list(final_path))
        logger.debug("ACCEPTABLE list length: %d", len(word_sets.acceptable))
        logger.debug("FINAL list length: %d", len(word_sets.final))
        return word_sets

    def is_acceptable(self, word: str) -> bool:
        return word in self.acceptable

    def is_final(self, word: str) -> bool:
        return word in self.final

    def answer_picker(self, seed: int) -> 'AnswerPicker':
        return AnswerPicker(self.final_words, seed)


class AnswerPicker:
    """Draws answers from an explicitly seeded generator."""

    def __init__(self, words: Tuple[str, ...], seed: int):
        self.words = words
        self.seed = seed
        self._rng = random.Random(seed)

    def pick(self) -> str:
        word = self._rng.choice(self.words)
        logger.debug("Random word selected: %s", word)
        return word


def generate_seed() -> int:
    return random.SystemRandom().getrandbits(SEED_BITS)


def resolve_seed(raw_seed: Optional[str]) -> Tuple[int, bool]:
    """
    Turns the configured seed into an integer.

    Returns:
        Tuple of (seed, generated) where generated is True when the seed
        was missing or could not be parsed and a fresh one was drawn
    """
    if raw_seed is None:
        seed = generate_seed()
        logger.debug("Generated random seed: %d", seed)
        return seed, True

    try:
        seed = int(str(raw_seed).strip())
        if seed < 0:
            raise ValueError("seed must not be negative")
        return seed, False
    except ValueError:
        seed = generate_seed()
        logger.warning("Invalid seed %r provided, using random seed %d", raw_seed, seed)
        return seed, True

