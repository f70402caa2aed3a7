"""
Stats Service

Loads and saves session statistics as a JSON record.
"""

import json
import logging
from pathlib import Path
from typing import Union

from ..models.stats import SessionStats

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_session_stats(path: PathLike) -> SessionStats:
    """
    Reads stats persisted by a previous session.

    A missing or unreadable file, or a record that fails validation, starts
    a fresh session instead of failing.
    """
    path = Path(path)
    if not path.exists():
        logger.debug("No state file at %s, starting fresh", path)
        return SessionStats()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return SessionStats.from_dict(data)
    except (OSError, json.JSONDecodeError, UnicodeDecodeError, ValueError, TypeError) as e:
        logger.warning("Ignoring unusable state file %s: %s", path, e)
        return SessionStats()


def save_session_stats(stats: SessionStats, path: PathLike) -> None:
    """
    Writes the stats record.

    Raises:
        OSError: If the file cannot be written
    """
    contents = json.dumps(stats.to_dict(), indent=2)
    Path(path).write_text(contents + "\n", encoding='utf-8')
