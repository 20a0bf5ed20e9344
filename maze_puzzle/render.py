"""Plain-text rendering of maze grids and solution paths."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .grid import Coord, Direction, Grid

NORTH_WALL = "_"
EAST_WALL = "|"
OPEN = " "

NO_SOLUTION = "No solution found!"
SOLUTION_HEADER = "Solution found:"


def render_rows(grid: Grid) -> List[str]:
    """One string per row, top to bottom; each cell is its north glyph then its east glyph."""

    rows: List[str] = []
    for y in range(grid.height):
        glyphs: List[str] = []
        for x in range(grid.width):
            glyphs.append(NORTH_WALL if grid.walls[y, x, Direction.NORTH] else OPEN)
            glyphs.append(EAST_WALL if grid.walls[y, x, Direction.EAST] else OPEN)
        rows.append("".join(glyphs))
    return rows


def render_grid(grid: Grid) -> str:
    return "\n".join(render_rows(grid))


def render_steps(path: Sequence[Coord]) -> List[str]:
    return [f"Step {index}: ({x},{y})" for index, (x, y) in enumerate(path, start=1)]


def render_solution(path: Optional[Sequence[Coord]]) -> str:
    if path is None:
        return NO_SOLUTION
    return "\n".join([SOLUTION_HEADER, *render_steps(path)])


__all__ = ["render_grid", "render_rows", "render_solution", "render_steps", "NO_SOLUTION", "SOLUTION_HEADER"]
