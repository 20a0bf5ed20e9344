"""Exception hierarchy shared by the grid, generator and solver."""

from __future__ import annotations


class MazeError(Exception):
    """Base class for maze construction and traversal errors."""


class InvalidDimensions(MazeError, ValueError):
    """Raised when a grid is requested with a non-positive width or height."""


class OutOfBounds(MazeError, IndexError):
    """Raised when a coordinate falls outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"Cell ({x}, {y}) is outside the {width}x{height} grid")
        self.x = x
        self.y = y


class NotAdjacent(MazeError, ValueError):
    """Raised when a wall is removed between cells that are not orthogonal neighbours."""


class Unreachable(MazeError):
    """Raised by callers that require a path when the goal cannot be reached."""


__all__ = [
    "MazeError",
    "InvalidDimensions",
    "OutOfBounds",
    "NotAdjacent",
    "Unreachable",
]
