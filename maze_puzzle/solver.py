"""A* shortest-path search over the passages of a maze grid."""

from __future__ import annotations

import heapq
import logging
from collections import deque
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from .errors import Unreachable
from .grid import Coord, Grid

Path = Tuple[Coord, ...]


def manhattan_distance(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one A* run; ``path`` is None when the goal is unreachable."""

    start: Coord
    goal: Coord
    path: Optional[Path]
    expanded: int

    @property
    def found(self) -> bool:
        return self.path is not None

    @property
    def cost(self) -> Optional[int]:
        return len(self.path) - 1 if self.path is not None else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start": list(self.start),
            "goal": list(self.goal),
            "found": self.found,
            "cost": self.cost,
            "expanded": self.expanded,
            "path": [list(step) for step in self.path] if self.path is not None else None,
        }


class MazeSolver:
    """Find the shortest passage-only route between two cells of a grid.

    The open set is a binary heap ordered by ``(f, insertion order)``. A cell
    keeps the sequence number it received when it first entered the open set,
    so among equal f-scores the earliest inserted cell is expanded first, the
    same choice a front-to-back scan of an insertion-ordered list makes.
    Improved cells are pushed again under their original sequence number and
    outdated heap entries are dropped when popped.
    """

    def __init__(self, grid: Grid) -> None:
        self.grid = grid

    def default_goal(self) -> Coord:
        return (self.grid.width - 1, self.grid.height - 1)

    def search(self, start: Coord = (0, 0), goal: Optional[Coord] = None) -> SearchResult:
        grid = self.grid
        start = grid.check(*start)
        goal = grid.check(*(goal if goal is not None else self.default_goal()))

        shape = (grid.height, grid.width)
        g_score = np.zeros(shape, dtype=np.int64)
        h_score = np.zeros(shape, dtype=np.int64)
        sequence = np.full(shape, -1, dtype=np.int64)
        parent = np.full(shape, -1, dtype=np.int64)
        in_open = np.zeros(shape, dtype=bool)
        closed = np.zeros(shape, dtype=bool)

        sx, sy = start
        h_score[sy, sx] = manhattan_distance(start, goal)
        sequence[sy, sx] = 0
        in_open[sy, sx] = True
        heap: List[Tuple[int, int, int, int]] = [(int(h_score[sy, sx]), 0, sx, sy)]
        next_sequence = 1
        expanded = 0

        while heap:
            f, _, x, y = heapq.heappop(heap)
            if closed[y, x] or f != g_score[y, x] + h_score[y, x]:
                continue
            in_open[y, x] = False
            closed[y, x] = True
            expanded += 1

            if (x, y) == goal:
                path = self._reconstruct(parent, x, y)
                logging.debug(f"A* reached {goal} from {start}: {len(path) - 1} steps, {expanded} cells expanded")
                return SearchResult(start=start, goal=goal, path=path, expanded=expanded)

            tentative_g = int(g_score[y, x]) + 1
            for nx, ny in grid.open_neighbors(x, y):
                if closed[ny, nx]:
                    continue
                h = manhattan_distance((nx, ny), goal)
                if not in_open[ny, nx] or tentative_g + h < g_score[ny, nx] + h_score[ny, nx]:
                    g_score[ny, nx] = tentative_g
                    h_score[ny, nx] = h
                    parent[ny, nx] = y * grid.width + x
                    if not in_open[ny, nx]:
                        in_open[ny, nx] = True
                        sequence[ny, nx] = next_sequence
                        next_sequence += 1
                    heapq.heappush(heap, (tentative_g + h, int(sequence[ny, nx]), nx, ny))

        logging.warning(f"No path from {start} to {goal} after expanding {expanded} cells")
        return SearchResult(start=start, goal=goal, path=None, expanded=expanded)

    def solve(self, start: Coord = (0, 0), goal: Optional[Coord] = None) -> Optional[Path]:
        return self.search(start, goal).path

    def _reconstruct(self, parent: np.ndarray, x: int, y: int) -> Path:
        width = self.grid.width
        steps: List[Coord] = [(x, y)]
        index = int(parent[y, x])
        while index >= 0:
            px, py = index % width, index // width
            steps.append((px, py))
            index = int(parent[py, px])
        steps.reverse()
        return tuple(steps)


def solve(grid: Grid, start: Coord = (0, 0), goal: Optional[Coord] = None) -> Optional[Path]:
    """Return the optimal path from ``start`` to ``goal`` (default: bottom-right), or None."""

    return MazeSolver(grid).solve(start, goal)


def require_path(grid: Grid, start: Coord = (0, 0), goal: Optional[Coord] = None) -> Path:
    result = MazeSolver(grid).search(start, goal)
    if result.path is None:
        raise Unreachable(f"Goal {result.goal} is not reachable from {result.start}")
    return result.path


def shortest_path_length(grid: Grid, start: Coord, goal: Coord) -> Optional[int]:
    """Breadth-first step count between two cells, or None when disconnected."""

    start = grid.check(*start)
    goal = grid.check(*goal)
    queue: deque[Coord] = deque([start])
    distance: Dict[Coord, int] = {start: 0}
    while queue:
        node = queue.popleft()
        if node == goal:
            return distance[node]
        for neighbor in grid.open_neighbors(*node):
            if neighbor not in distance:
                distance[neighbor] = distance[node] + 1
                queue.append(neighbor)
    return None


__all__ = [
    "MazeSolver",
    "Path",
    "SearchResult",
    "manhattan_distance",
    "require_path",
    "shortest_path_length",
    "solve",
]
