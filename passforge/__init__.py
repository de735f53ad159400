"""passforge -- secure password and passphrase generation.

Core functions for unbiased random index generation, password and
passphrase synthesis, and password strength scoring.  Nothing here
touches the network or stores a generated secret.
"""

import logging
import math
import re
import secrets
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Sequence

from passforge.errors import (
    InvalidArgumentError,
    PassforgeError,
    UnavailableResourceError,
)
from passforge.wordlist import get_wordlist, load_wordlist

__all__ = [
    "CHARACTER_SETS",
    "CharsetOptions",
    "InvalidArgumentError",
    "PassforgeError",
    "UnavailableResourceError",
    "analyse_strength",
    "calculate_entropy",
    "calculate_password_entropy",
    "calculate_strength",
    "clamp_password_length",
    "clamp_word_count",
    "generate_passphrase",
    "generate_password",
    "get_strength_description",
    "get_wordlist",
    "load_wordlist",
    "secure_random_int",
]

logger = logging.getLogger(__name__)

EntropySource = Callable[[], int]


# ── Unbiased random integers ───────────────────────────────────────────────

_UINT32_RANGE = 2**32


def system_uint32() -> int:
    """Return a uniformly random 32-bit unsigned integer from the OS CSPRNG."""
    return secrets.randbits(32)


def _rejection_limit(max_value: int) -> int:
    # Largest multiple of max_value that fits in 32 bits; draws at or above
    # it would make the low residues more likely.
    return (_UINT32_RANGE // max_value) * max_value


def secure_random_int(max_value: int, *, source: EntropySource | None = None) -> int:
    """Return an integer uniformly distributed over ``[0, max_value)``.

    Uses rejection sampling over 32-bit draws so the result carries no
    modulo bias.  *source* replaces the CSPRNG (tests only); it must return
    ints in ``[0, 2**32)``.
    """
    if isinstance(max_value, bool) or not isinstance(max_value, int):
        raise InvalidArgumentError(f"max_value must be an int, got {max_value!r}")
    if max_value <= 0:
        raise InvalidArgumentError("max_value must be positive")
    if max_value > _UINT32_RANGE:
        raise InvalidArgumentError("max_value must not exceed 2**32")
    if max_value == 1:
        return 0

    draw = source or system_uint32
    limit = _rejection_limit(max_value)
    value = draw()
    while value >= limit:
        value = draw()
    return value % max_value


# ── Character sets and options ─────────────────────────────────────────────

CHARACTER_SETS: Mapping[str, str] = MappingProxyType({
    "lower": "abcdefghijklmnopqrstuvwxyz",
    "upper": "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "numbers": "0123456789",
    "symbols": "!@#$%^&*()_+-=[]{}|;:,.<>?",
})

for _name, _chars in CHARACTER_SETS.items():
    if not _chars:
        raise RuntimeError(f"character set {_name!r} is empty")

PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 64
PASSWORD_DEFAULT_LENGTH = 16

PASSPHRASE_MIN_WORDS = 3
PASSPHRASE_MAX_WORDS = 12
PASSPHRASE_DEFAULT_WORDS = 6
SEPARATOR_MAX_LENGTH = 10
DEFAULT_SEPARATOR = "-"


@dataclass(frozen=True)
class CharsetOptions:
    """Which character sets a generated password may draw from."""

    lower: bool = True
    upper: bool = True
    numbers: bool = True
    symbols: bool = True

    @classmethod
    def coerce(cls, options) -> "CharsetOptions":
        """Accept a CharsetOptions, a mapping of flags, or None (all sets)."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls(**{name: bool(options.get(name, False)) for name in CHARACTER_SETS})

    def pool(self) -> str:
        """Concatenate the enabled sets in catalog order."""
        return "".join(
            chars for name, chars in CHARACTER_SETS.items() if getattr(self, name)
        )


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _coerce_int(value, default: int) -> int:
    """Read a user-supplied number leniently; unusable input gives *default*."""
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else default
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else default
    return default


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def clamp_password_length(length) -> int:
    """Coerce a user-supplied password length and clamp it to 6..64."""
    return _clamp(
        _coerce_int(length, PASSWORD_DEFAULT_LENGTH),
        PASSWORD_MIN_LENGTH,
        PASSWORD_MAX_LENGTH,
    )


def _build_pool(options) -> str:
    pool = CharsetOptions.coerce(options).pool()
    if not pool:
        raise InvalidArgumentError("no character set selected")
    return pool


# ── Password generation ────────────────────────────────────────────────────


def generate_password(
    length=PASSWORD_DEFAULT_LENGTH,
    options: CharsetOptions | Mapping[str, bool] | None = None,
    *,
    source: EntropySource | None = None,
) -> str:
    """Generate a cryptographically secure random password.

    Every position is an independent uniform draw from the pool of enabled
    character sets, so characters may repeat.  *length* is clamped to
    6..64; non-numeric input means 16.
    """
    pool = _build_pool(options)
    count = clamp_password_length(length)

    logger.debug("Generating password: length=%d pool_size=%d", count, len(pool))
    return "".join(pool[secure_random_int(len(pool), source=source)] for _ in range(count))


def calculate_password_entropy(length=PASSWORD_DEFAULT_LENGTH, options=None) -> float:
    """Bits of entropy in a password generated with the same arguments."""
    pool = _build_pool(options)
    return clamp_password_length(length) * math.log2(len(pool))


# ── Passphrase generation ──────────────────────────────────────────────────


def clamp_word_count(word_count) -> int:
    """Coerce a user-supplied word count and clamp it to 3..12."""
    return _clamp(
        _coerce_int(word_count, PASSPHRASE_DEFAULT_WORDS),
        PASSPHRASE_MIN_WORDS,
        PASSPHRASE_MAX_WORDS,
    )


def _resolve_wordlist(wordlist: Sequence[str] | None) -> Sequence[str]:
    words = get_wordlist() if wordlist is None else wordlist
    if not words:
        raise UnavailableResourceError("word list not loaded")
    return words


def generate_passphrase(
    word_count=PASSPHRASE_DEFAULT_WORDS,
    separator: str | None = DEFAULT_SEPARATOR,
    *,
    wordlist: Sequence[str] | None = None,
    source: EntropySource | None = None,
) -> str:
    """Generate a passphrase of independently drawn words.

    *word_count* is clamped to 3..12 (non-numeric input means 6) and
    *separator* is cut to 10 characters, ``"-"`` when empty.  Words may
    repeat.  Raises :class:`UnavailableResourceError` without a word list.
    """
    words = _resolve_wordlist(wordlist)
    count = clamp_word_count(word_count)
    sep = (separator or DEFAULT_SEPARATOR)[:SEPARATOR_MAX_LENGTH]

    logger.debug("Generating passphrase: word_count=%d list_size=%d", count, len(words))
    return sep.join(words[secure_random_int(len(words), source=source)] for _ in range(count))


def calculate_entropy(word_count, *, wordlist: Sequence[str] | None = None) -> float:
    """Return ``word_count * log2(len(wordlist))`` bits, or 0 without a list."""
    try:
        words = _resolve_wordlist(wordlist)
    except UnavailableResourceError:
        logger.warning("Word list unavailable; reporting zero entropy")
        return 0.0
    return _coerce_int(word_count, 0) * math.log2(len(words))


# ── Strength analysis ──────────────────────────────────────────────────────

_CLASS_PATTERNS = {
    "lowercase": re.compile(r"[a-z]"),
    "uppercase": re.compile(r"[A-Z]"),
    "digits": re.compile(r"[0-9]"),
    # Anything else counts as a symbol, including non-ASCII letters.
    "symbols": re.compile(r"[^a-zA-Z0-9]"),
}

_STRENGTH_BANDS = [
    (40, "weak"),
    (70, "medium"),
    (90, "strong"),
]


def _char_classes(password: str) -> dict[str, bool]:
    return {name: bool(p.search(password)) for name, p in _CLASS_PATTERNS.items()}


def calculate_strength(password: str | None) -> int:
    """Score *password* from 0 to 100.

    Length gives 4 points per character up to 40, each character class
    present gives 15, and every repeated character costs 2.
    """
    if not password:
        return 0

    score = min(len(password) * 4, 40)
    score += sum(_char_classes(password).values()) * 15

    repetition_penalty = (len(password) - len(set(password))) * 2
    score = max(0, score - repetition_penalty)

    return min(score, 100)


def get_strength_description(score: int) -> str:
    for upper_bound, label in _STRENGTH_BANDS:
        if score < upper_bound:
            return label
    return "very strong"


def analyse_strength(password: str | None) -> dict:
    """Analyse password strength and return a report.

    Returns a dict with keys:
        length       -- int
        char_classes -- dict[str, bool]  (lowercase, uppercase, digits, symbols)
        score        -- int 0-100
        label        -- str
    """
    password = password or ""
    score = calculate_strength(password)
    return {
        "length": len(password),
        "char_classes": _char_classes(password),
        "score": score,
        "label": get_strength_description(score),
    }
