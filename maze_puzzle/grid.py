"""Rectangular grid of cells with paired walls.

Wall state lives in a dense boolean array ``walls[y, x, direction]`` and the
generator's bookkeeping in ``visited[y, x]``. Cells are addressed by ``(x, y)``
with ``x`` growing to the east and ``y`` growing to the south, so the top-left
cell is ``(0, 0)``.
"""

from __future__ import annotations

import operator
from enum import IntEnum
from typing import Dict, Iterator, List, Tuple

import numpy as np

from .errors import InvalidDimensions, NotAdjacent, OutOfBounds

Coord = Tuple[int, int]


class Direction(IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def offset(self) -> Coord:
        return _OFFSETS[self]

    @property
    def opposite(self) -> "Direction":
        return Direction((self + 2) % 4)


_OFFSETS: Dict[Direction, Coord] = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}
_DIRECTION_BY_OFFSET: Dict[Coord, Direction] = {offset: d for d, offset in _OFFSETS.items()}

# Neighbour scan order shared by every traversal.
NEIGHBOR_ORDER: Tuple[Direction, ...] = (
    Direction.WEST,
    Direction.EAST,
    Direction.NORTH,
    Direction.SOUTH,
)


class Cell:
    """Live view of one grid cell; reads always reflect the grid's current state."""

    __slots__ = ("_grid", "x", "y")

    def __init__(self, grid: "Grid", x: int, y: int) -> None:
        self._grid = grid
        self.x = x
        self.y = y

    @property
    def coord(self) -> Coord:
        return (self.x, self.y)

    @property
    def north(self) -> bool:
        return bool(self._grid.walls[self.y, self.x, Direction.NORTH])

    @property
    def east(self) -> bool:
        return bool(self._grid.walls[self.y, self.x, Direction.EAST])

    @property
    def south(self) -> bool:
        return bool(self._grid.walls[self.y, self.x, Direction.SOUTH])

    @property
    def west(self) -> bool:
        return bool(self._grid.walls[self.y, self.x, Direction.WEST])

    @property
    def visited(self) -> bool:
        return bool(self._grid.visited[self.y, self.x])

    def walls(self) -> Dict[str, bool]:
        return {
            "north": self.north,
            "east": self.east,
            "south": self.south,
            "west": self.west,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self._grid is other._grid and self.coord == other.coord

    def __hash__(self) -> int:
        return hash((id(self._grid), self.x, self.y))

    def __repr__(self) -> str:
        return f"Cell(x={self.x}, y={self.y}, walls={self.walls()}, visited={self.visited})"


class Grid:
    """A ``width x height`` maze grid; every wall starts present and no cell is visited."""

    def __init__(self, width: int, height: int) -> None:
        if isinstance(width, bool) or isinstance(height, bool):
            raise InvalidDimensions(f"Grid dimensions must be integers, got {width!r}x{height!r}")
        try:
            width, height = operator.index(width), operator.index(height)
        except TypeError as exc:
            raise InvalidDimensions(f"Grid dimensions must be integers, got {width!r}x{height!r}") from exc
        if width <= 0 or height <= 0:
            raise InvalidDimensions(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.walls = np.ones((height, width, len(Direction)), dtype=bool)
        self.visited = np.zeros((height, width), dtype=bool)

    @classmethod
    def create(cls, width: int, height: int) -> "Grid":
        return cls(width, height)

    @property
    def size(self) -> int:
        return self.width * self.height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def check(self, x: int, y: int) -> Coord:
        """Return ``(x, y)`` as plain ints, raising ``OutOfBounds`` outside the grid.

        Non-integer coordinates raise ``TypeError`` instead of being truncated.
        """

        try:
            x, y = operator.index(x), operator.index(y)
        except TypeError as exc:
            raise TypeError(f"Cell coordinates must be integers, got ({x!r}, {y!r})") from exc
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self.width, self.height)
        return (x, y)

    def cell_at(self, x: int, y: int) -> Cell:
        x, y = self.check(x, y)
        return Cell(self, x, y)

    def cells(self) -> Iterator[Coord]:
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def mark_visited(self, x: int, y: int) -> None:
        x, y = self.check(x, y)
        self.visited[y, x] = True

    def is_visited(self, x: int, y: int) -> bool:
        x, y = self.check(x, y)
        return bool(self.visited[y, x])

    def has_wall(self, x: int, y: int, direction: Direction) -> bool:
        x, y = self.check(x, y)
        return bool(self.walls[y, x, direction])

    def remove_wall_between(self, a: Coord, b: Coord) -> Direction:
        """Open the passage between two orthogonal neighbours.

        Returns the direction of ``b`` as seen from ``a``.
        """

        return self._set_wall_between(a, b, False)

    def add_wall_between(self, a: Coord, b: Coord) -> Direction:
        return self._set_wall_between(a, b, True)

    def _set_wall_between(self, a: Coord, b: Coord, present: bool) -> Direction:
        x1, y1 = self.check(*a)
        x2, y2 = self.check(*b)
        direction = _DIRECTION_BY_OFFSET.get((x2 - x1, y2 - y1))
        if direction is None:
            raise NotAdjacent(f"Cells {(x1, y1)} and {(x2, y2)} are not orthogonally adjacent")
        self.walls[y1, x1, direction] = present
        self.walls[y2, x2, direction.opposite] = present
        return direction

    def _neighbors(self, x: int, y: int) -> Iterator[Tuple[Direction, int, int]]:
        x, y = self.check(x, y)
        for direction in NEIGHBOR_ORDER:
            dx, dy = direction.offset
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                yield direction, nx, ny

    def unvisited_neighbors(self, x: int, y: int) -> List[Coord]:
        return [(nx, ny) for _, nx, ny in self._neighbors(x, y) if not self.visited[ny, nx]]

    def open_neighbors(self, x: int, y: int) -> List[Coord]:
        return [(nx, ny) for d, nx, ny in self._neighbors(x, y) if not self.walls[y, x, d]]

    # ------------------------------------------------------------------

    def all_visited(self) -> bool:
        return bool(self.visited.all())

    def is_symmetric(self) -> bool:
        """True when every shared wall is recorded identically on both sides."""

        horizontal = np.array_equal(
            self.walls[:, :-1, Direction.EAST], self.walls[:, 1:, Direction.WEST]
        )
        vertical = np.array_equal(
            self.walls[:-1, :, Direction.SOUTH], self.walls[1:, :, Direction.NORTH]
        )
        return horizontal and vertical

    def open_edge_count(self) -> int:
        """Number of interior passages, counting each opened wall pair once."""

        horizontal = np.count_nonzero(~self.walls[:, :-1, Direction.EAST])
        vertical = np.count_nonzero(~self.walls[:-1, :, Direction.SOUTH])
        return int(horizontal + vertical)

    def copy(self) -> "Grid":
        clone = Grid(self.width, self.height)
        clone.walls = self.walls.copy()
        clone.visited = self.visited.copy()
        return clone

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"


__all__ = ["Cell", "Coord", "Direction", "Grid", "NEIGHBOR_ORDER"]
