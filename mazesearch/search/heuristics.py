"""Distance estimates for best-first search over grid mazes."""

from __future__ import annotations

import math
from typing import Any, Callable, Dict

from ..errors import InvalidArgumentError
from ..maze.grid import GridMaze, Position, PositionLike, as_position

Heuristic = Callable[[Any], float]


def zero_heuristic(state: Any) -> float:
    return 0.0


def manhattan(goal: PositionLike) -> Heuristic:
    """Admissible for orthogonal moves of cost 1."""

    target = as_position(goal)

    def estimate(state: Any) -> float:
        position: Position = state.position
        return float(abs(position.row - target.row) + abs(position.col - target.col))

    return estimate


def octile(goal: PositionLike) -> Heuristic:
    """Admissible when diagonal moves cost sqrt(2)."""

    target = as_position(goal)

    def estimate(state: Any) -> float:
        position: Position = state.position
        d_row = abs(position.row - target.row)
        d_col = abs(position.col - target.col)
        return float(max(d_row, d_col) - min(d_row, d_col)) + math.sqrt(2) * min(d_row, d_col)

    return estimate


HEURISTIC_FACTORIES: Dict[str, Callable[[GridMaze], Heuristic]] = {
    "zero": lambda maze: zero_heuristic,
    "manhattan": lambda maze: manhattan(maze.goal),
    "octile": lambda maze: octile(maze.goal),
}


def heuristic_for(name: str, maze: GridMaze) -> Heuristic:
    try:
        factory = HEURISTIC_FACTORIES[name.lower()]
    except KeyError as exc:
        available = ", ".join(HEURISTIC_FACTORIES)
        raise InvalidArgumentError(f"Unknown heuristic: {name}. Available: {available}") from exc
    return factory(maze)


__all__ = [
    "Heuristic",
    "zero_heuristic",
    "manhattan",
    "octile",
    "heuristic_for",
    "HEURISTIC_FACTORIES",
]
