from __future__ import annotations


class MemoryGameError(Exception):
    """Base class for all memory game errors."""


class InvalidSizeError(MemoryGameError, ValueError):
    """Grid dimension is not a positive even integer."""


class InsufficientSymbolsError(MemoryGameError, ValueError):
    """The symbol pool cannot fill every pair of the requested grid."""


class InvalidStateTransitionError(MemoryGameError):
    """A reveal was attempted that the current board or phase does not allow.

    The engine treats this as a no-op; it never reaches the host.
    """
