from __future__ import annotations


class RpsError(Exception):
    pass


class InvalidConfiguration(RpsError, ValueError):
    """Move set is even-sized, smaller than three, or has duplicates."""


class UnknownMove(RpsError, LookupError):
    pass


class IndexOutOfRange(RpsError, IndexError):
    pass


class InvalidInput(RpsError, ValueError):
    """Human input that does not name a move (including the exit sentinel)."""


class SessionStateError(RpsError, RuntimeError):
    pass
