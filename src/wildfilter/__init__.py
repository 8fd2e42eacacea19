"""wildfilter — shell-style wildcard file name filters."""

__version__ = "0.1.0"


class WildfilterError(Exception):
    """User-facing ``wfind`` error.

    Raised for a missing search directory, an invalid level and similar
    input problems. ``main`` prints the message to stderr and exits 1.
    """
