"""Word list loading for passphrase generation.

The default list is the BIP39 English corpus (2048 words, 11 bits each)
shipped with the ``mnemonic`` distribution.  A plain-text override (one
word per line) can be configured with ``PASSFORGE_WORDLIST_PATH``.
"""

import logging
from functools import lru_cache
from pathlib import Path

from mnemonic import Mnemonic

from passforge.config import get_settings
from passforge.errors import UnavailableResourceError

logger = logging.getLogger(__name__)

BIP39_LANGUAGE = "english"


def validate_wordlist(words) -> tuple[str, ...]:
    """Return *words* as an immutable tuple, or raise if it is unusable.

    A usable list is non-empty, has no duplicates and has a power-of-two
    length, so every word carries a whole number of bits.
    """
    words = tuple(words)
    if not words:
        raise UnavailableResourceError("word list is empty")
    if len(set(words)) != len(words):
        raise UnavailableResourceError("word list contains duplicate words")
    if len(words) & (len(words) - 1):
        raise UnavailableResourceError(
            f"word list size must be a power of two, got {len(words)}"
        )
    return words


def _read_wordlist_file(path: Path) -> list[str]:
    try:
        with open(path, encoding="utf-8") as f:
            return [line.strip() for line in f if line.strip()]
    except OSError as exc:
        raise UnavailableResourceError(f"cannot read word list {path}: {exc}") from exc


@lru_cache(maxsize=None)
def load_wordlist(path: Path | None = None) -> tuple[str, ...]:
    """Load, validate and cache a word list.

    With no *path* the BIP39 English list is used.
    """
    if path is None:
        try:
            raw = Mnemonic(BIP39_LANGUAGE).wordlist
        except Exception as exc:
            raise UnavailableResourceError(f"BIP39 word list not loaded: {exc}") from exc
        source = f"bip39:{BIP39_LANGUAGE}"
    else:
        raw = _read_wordlist_file(Path(path))
        source = str(path)

    words = validate_wordlist(raw)
    logger.debug("Loaded word list from %s (%d words)", source, len(words))
    return words


def get_wordlist() -> tuple[str, ...]:
    """Return the configured word list."""
    return load_wordlist(get_settings().WORDLIST_PATH)
