"""Walk candidate paths over grid mazes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .grid import FREE, GridMaze, Position, PositionLike, as_position


@dataclass
class PathCheck:
    """Outcome of walking a candidate path over a maze."""

    starts_at_start: bool
    reaches_goal: bool
    connected: bool
    stray_in_walls: bool
    out_of_bounds: bool
    cost: float

    @property
    def is_valid(self) -> bool:
        return (
            self.starts_at_start
            and self.reaches_goal
            and self.connected
            and not self.stray_in_walls
            and not self.out_of_bounds
        )


def validate_path(
    maze: GridMaze,
    path: Sequence[PositionLike],
    *,
    allow_diagonals: bool = False,
) -> PathCheck:
    """Check that ``path`` walks from start to goal over adjacent free cells.

    Diagonal steps are accepted only with ``allow_diagonals`` and only where
    one of the two orthogonal cells beside the step is free.
    """

    cells = [as_position(cell) for cell in path]
    if not cells:
        return PathCheck(False, False, False, False, False, math.inf)

    coords = np.array(cells, dtype=np.int64).reshape(-1, 2)
    inside = (
        (coords[:, 0] >= 0)
        & (coords[:, 0] < maze.rows)
        & (coords[:, 1] >= 0)
        & (coords[:, 1] < maze.cols)
    )
    out_of_bounds = not bool(inside.all())
    clipped = coords[inside]
    stray_in_walls = bool(np.any(maze.cells[clipped[:, 0], clipped[:, 1]] != FREE))

    steps = np.abs(np.diff(coords, axis=0))
    orthogonal = steps.sum(axis=1) == 1
    diagonal = (steps[:, 0] == 1) & (steps[:, 1] == 1)
    connected = bool(orthogonal.all())
    if allow_diagonals:
        connected = bool((orthogonal | diagonal).all()) and all(
            _corner_is_open(maze, cells[index], cells[index + 1])
            for index in np.flatnonzero(diagonal)
        )
    cost = float(orthogonal.sum()) + math.sqrt(2) * float(diagonal.sum())

    return PathCheck(
        starts_at_start=cells[0] == maze.start,
        reaches_goal=cells[-1] == maze.goal,
        connected=connected,
        stray_in_walls=stray_in_walls,
        out_of_bounds=out_of_bounds,
        cost=cost if connected else math.inf,
    )


def _corner_is_open(maze: GridMaze, origin: Position, target: Position) -> bool:
    return maze.is_free((target.row, origin.col)) or maze.is_free((origin.row, target.col))


__all__ = ["PathCheck", "validate_path"]
