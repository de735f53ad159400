"""Exception types raised by the passforge core."""


class PassforgeError(Exception):
    """Base class for every failure the core raises."""


class InvalidArgumentError(PassforgeError, ValueError):
    """The caller asked for something the core cannot produce.

    Raised for a non-positive random range or an empty character pool.
    Out-of-range lengths and word counts are clamped instead.
    """


class UnavailableResourceError(PassforgeError, RuntimeError):
    """A static dataset (the word list) could not be loaded."""
