"""Perfect maze generator using randomized depth-first backtracking."""

from __future__ import annotations

import argparse
import json
import logging
import random
from typing import List, Optional, Tuple

from .errors import MazeError
from .grid import Coord, Grid
from .record import MazeRecord
from .render import render_grid, render_solution
from .solver import MazeSolver

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class MazeGenerator:
    """Carve a spanning tree into a grid so exactly one simple path joins any two cells."""

    DEFAULT_WIDTH = 15
    DEFAULT_HEIGHT = 15
    DEFAULT_START: Coord = (0, 0)

    def __init__(self, seed: Optional[int] = None, *, rng: Optional[random.Random] = None) -> None:
        self.seed = seed
        self._rng = rng if rng is not None else random.Random(seed)

    @property
    def rng(self) -> random.Random:
        return self._rng

    def create_maze(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT, start: Optional[Coord] = None) -> Grid:
        grid = Grid(width, height)
        self.generate(grid, start)
        return grid

    def generate(self, grid: Grid, start: Optional[Coord] = None) -> Grid:
        """Carve ``grid`` in place starting from ``start`` and return it.

        Each stack frame holds a cell and the unvisited neighbours it had when
        it was entered. Candidates are drawn from the frame at random; one that
        a deeper branch has already reached is discarded without carving.
        """

        origin = grid.check(*(start if start is not None else self.DEFAULT_START))
        if grid.visited.any() or not grid.walls.all():
            raise ValueError("generate() expects a freshly created grid with every wall present and no visited cells")

        grid.mark_visited(*origin)
        stack: List[Tuple[Coord, List[Coord]]] = [(origin, grid.unvisited_neighbors(*origin))]
        carved = 0
        deepest = 1
        while stack:
            current, candidates = stack[-1]
            if not candidates:
                stack.pop()
                continue
            nx, ny = candidates.pop(self._rng.randrange(len(candidates)))
            if grid.is_visited(nx, ny):
                continue
            grid.remove_wall_between(current, (nx, ny))
            grid.mark_visited(nx, ny)
            stack.append(((nx, ny), grid.unvisited_neighbors(nx, ny)))
            carved += 1
            deepest = max(deepest, len(stack))

        logging.debug(
            f"Carved {grid.width}x{grid.height} maze from {origin}: {carved} passages, max stack depth {deepest}"
        )
        return grid

    # ------------------------------------------------------------------

    @classmethod
    def _parse_args(cls, argv: Optional[List[str]] = None) -> argparse.Namespace:
        parser = argparse.ArgumentParser(description="Generate a perfect maze and solve it with A*")
        parser.add_argument("--width", type=int, default=cls.DEFAULT_WIDTH)
        parser.add_argument("--height", type=int, default=cls.DEFAULT_HEIGHT)
        parser.add_argument("--seed", type=int, default=None)
        parser.add_argument("--start", type=int, nargs=2, metavar=("X", "Y"), default=None, help="Carving and search origin (default: 0 0)")
        parser.add_argument("--goal", type=int, nargs=2, metavar=("X", "Y"), default=None, help="Search target (default: bottom-right cell)")
        parser.add_argument("--format", choices=["text", "json"], default="text")
        parser.add_argument("--no-solve", action="store_true", help="Only print the maze")
        parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
        return parser.parse_args(argv)

    @classmethod
    def main(cls, argv: Optional[List[str]] = None) -> int:
        args = cls._parse_args(argv)
        logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format=LOG_FORMAT)

        start = tuple(args.start) if args.start is not None else cls.DEFAULT_START
        try:
            generator = cls(seed=args.seed)
            grid = generator.create_maze(args.width, args.height, start=start)
            solver = MazeSolver(grid)
            goal = grid.check(*args.goal) if args.goal is not None else solver.default_goal()
            result = None if args.no_solve else solver.search(start, goal)
        except MazeError as exc:
            logging.error(f"{exc}")
            return 2

        if args.format == "json":
            record = MazeRecord.from_maze(grid, seed=args.seed, start=start, goal=goal, result=result)
            print(json.dumps(record.to_dict(), indent=2))
            return 0

        print(render_grid(grid))
        if result is not None:
            print()
            print(render_solution(result.path))
        return 0


def generate(grid: Grid, start: Coord = (0, 0), rng: Optional[random.Random] = None) -> Grid:
    """Carve ``grid`` into a perfect maze using ``rng`` (a fresh unseeded source by default)."""

    return MazeGenerator(rng=rng).generate(grid, start)


__all__ = ["MazeGenerator", "generate"]


def main(argv: Optional[List[str]] = None) -> int:
    return MazeGenerator.main(argv)


if __name__ == "__main__":
    raise SystemExit(MazeGenerator.main())
