"""
Helper Functions

Contains utility functions used throughout the application.
"""


def normalize_word(raw: str) -> str:
    """Trim surrounding whitespace and upper-case a typed word."""
    return raw.strip().upper()


def is_yes(raw: str) -> bool:
    """Only a literal 'y' answers yes."""
    return raw.strip().lower() == 'y'
