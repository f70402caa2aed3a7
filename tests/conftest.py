import os
import tempfile

import pytest

# Keep log files out of the working tree; must run before the package is imported.
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordle-logs-'))

from wordle_game.models.stats import SessionStats  # noqa: E402
from wordle_game.services.word_service import WordSets  # noqa: E402

ACCEPTABLE = [
    "ALLOY", "BRACE", "BRAVE", "CRANE", "CRATE", "DROOL", "EERIE", "GRACE",
    "HELLO", "LLAMA", "MOUNT", "RAISE", "SLATE", "SLEEK", "SNAKE", "SPEED",
    "STARE", "STEEP", "TRACE", "WORLD",
]
FINAL = ["CRANE", "ALLOY", "STEEP", "SPEED", "MOUNT"]


@pytest.fixture
def word_sets() -> WordSets:
    return WordSets(acceptable=ACCEPTABLE, final=FINAL)


@pytest.fixture
def stats() -> SessionStats:
    return SessionStats()
