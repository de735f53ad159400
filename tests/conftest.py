import logging

import pytest

from passforge.config import get_settings
from passforge.wordlist import load_wordlist


@pytest.fixture(autouse=True)
def _fresh_caches():
    """Settings and word lists are cached per process; reset them per test."""
    get_settings.cache_clear()
    load_wordlist.cache_clear()
    yield
    get_settings.cache_clear()
    load_wordlist.cache_clear()

    # Handlers bound to a test's captured stderr must not outlive it.
    logger = logging.getLogger("passforge")
    logger.handlers = []
    logger.setLevel(logging.NOTSET)


class SequenceSource:
    """Deterministic stand-in for the CSPRNG that records how often it is read."""

    def __init__(self, values):
        self._values = iter(values)
        self.calls = 0

    def __call__(self) -> int:
        self.calls += 1
        return next(self._values)


@pytest.fixture
def sequence_source():
    return SequenceSource
