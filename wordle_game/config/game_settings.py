"""
Game Configuration Constants Module

This module defines the game rules and the word list loading used by the
rest of the package. The bundled lists live next to this file as JSON
arrays: acceptable.json (every guessable word) and final.json (the words
that may be chosen as the answer).
"""

import json
import os
from typing import Iterable, List, Final

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of accepted guesses per round.
Type: Final[int] - Immutable to prevent accidental modification
"""

CONFIG_DIR: Final[str] = os.path.dirname(os.path.abspath(__file__))
ACCEPTABLE_WORDS_PATH: Final[str] = os.path.join(CONFIG_DIR, 'acceptable.json')
FINAL_WORDS_PATH: Final[str] = os.path.join(CONFIG_DIR, 'final.json')


def load_word_list(json_file_path: str) -> List[str]:
    """
    Load a word list from a JSON file.

    Args:
        json_file_path: Path to a JSON document holding an array of words

    Returns:
        List[str]: Uppercase words in file order

    Raises:
        FileNotFoundError: If the file is not found
        ValueError: If the JSON is malformed, the list is empty or a word is invalid
    """
    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_file_path}: {e}")

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    uppercase_words = []
    for word in word_list:
        if not isinstance(word, str):
            raise ValueError(f"Word list entry {word!r} is not a string")
        word = word.strip().upper()
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word '{word}' is not {WORD_LENGTH} characters long")
        if not word.isalpha():
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")
        uppercase_words.append(word)

    return uppercase_words


def validate_word_list_integrity(acceptable: Iterable[str], final: Iterable[str]) -> bool:
    """
    Validates the consistency of the two word lists.

    1. Uniqueness validation: no duplicate entries in either list
    2. Subset validation: every final word is also acceptable

    Returns:
        bool: True if the lists pass all checks

    Raises:
        ValueError: If any check fails with a detailed error message
    """
    acceptable = list(acceptable)
    final = list(final)

    for name, words in (('acceptable', acceptable), ('final', final)):
        if len(words) != len(set(words)):
            duplicates = sorted({word for word in words if words.count(word) > 1})
            raise ValueError(f"Duplicate words found in {name} word list: {duplicates}")

    missing = sorted(set(final) - set(acceptable))
    if missing:
        raise ValueError(f"Final words missing from the acceptable list: {missing}")

    return True
