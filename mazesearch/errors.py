"""Exception hierarchy shared by the maze and search packages."""

from __future__ import annotations


class MazeError(Exception):
    """Base class for every error raised by mazesearch."""


class InvalidDimensionsError(MazeError, ValueError):
    """Raised when a maze is requested with fewer than two rows or columns."""


class CorruptMazeError(MazeError, ValueError):
    """Raised when a maze read from outside the library is malformed."""


class InvalidArgumentError(MazeError, ValueError):
    """Raised when a caller breaks the contract of a public operation."""


class UnreachableGoalError(MazeError):
    """Raised when a path is explicitly required but the goal cannot be reached."""


__all__ = [
    "MazeError",
    "InvalidDimensionsError",
    "CorruptMazeError",
    "InvalidArgumentError",
    "UnreachableGoalError",
]
