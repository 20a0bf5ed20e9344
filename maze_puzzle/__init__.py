"""Perfect maze generation and A* solving."""

__all__ = [
    "Cell",
    "Direction",
    "Grid",
    "MazeGenerator",
    "MazeRecord",
    "MazeSolver",
    "SearchResult",
    "MazeError",
    "InvalidDimensions",
    "OutOfBounds",
    "NotAdjacent",
    "Unreachable",
    "generate",
    "solve",
    "render_grid",
    "render_solution",
]

from .errors import InvalidDimensions, MazeError, NotAdjacent, OutOfBounds, Unreachable
from .grid import Cell, Direction, Grid
from .solver import MazeSolver, SearchResult, solve
from .render import render_grid, render_solution
from .record import MazeRecord
from .generator import MazeGenerator, generate
