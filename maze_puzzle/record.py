"""Serializable summary of a generated and solved maze."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .grid import Coord, Grid
from .render import render_rows
from .solver import SearchResult


@dataclass
class MazeRecord:
    """Everything the driver reports about one maze, ready for ``json.dumps``."""

    width: int
    height: int
    seed: Optional[int]
    start: Coord
    goal: Coord
    rows: List[str]
    solution: Optional[List[Coord]] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_maze(
        cls,
        grid: Grid,
        *,
        seed: Optional[int],
        start: Coord,
        goal: Coord,
        result: Optional[SearchResult] = None,
    ) -> "MazeRecord":
        extra: Dict[str, Any] = {"passages": grid.open_edge_count()}
        solution = None
        extra["solved"] = result is not None
        if result is not None:
            extra["expanded"] = result.expanded
            extra["cost"] = result.cost
            if result.path is not None:
                solution = list(result.path)
        return cls(
            width=grid.width,
            height=grid.height,
            seed=seed,
            start=start,
            goal=goal,
            rows=render_rows(grid),
            solution=solution,
            extra=extra,
        )

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "grid_size": [int(self.width), int(self.height)],
            "seed": self.seed,
            "start": list(self.start),
            "goal": list(self.goal),
            "rows": list(self.rows),
            "solution": [list(step) for step in self.solution] if self.solution is not None else None,
        }
        for key, value in self.extra.items():
            if key not in payload:
                payload[key] = value
        return payload


__all__ = ["MazeRecord"]
