"""Generic searchable-graph contract and its grid maze adapter."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Generic, List, Optional, Tuple, TypeVar

from ..maze.grid import ORTHOGONAL_STEPS, GridMaze, Position

StateT = TypeVar("StateT")

DIAGONAL_STEPS: Tuple[Tuple[int, int], ...] = ((-1, 1), (1, 1), (1, -1), (-1, -1))
ORTHOGONAL_COST = 1.0
DIAGONAL_COST = math.sqrt(2)


class AbstractSearchable(ABC, Generic[StateT]):
    """State space that the search algorithms explore.

    States must be hashable and compare equal when they denote the same
    domain identity, whatever cost annotation they carry.
    """

    @abstractmethod
    def start_state(self) -> Optional[StateT]:
        """Return the state the search begins from."""

    @abstractmethod
    def is_goal(self, state: StateT) -> bool:
        """Return True when ``state`` satisfies the goal test."""

    @abstractmethod
    def successors(self, state: StateT) -> List[Tuple[StateT, float]]:
        """Return ``(state, edge_cost)`` pairs reachable in one step."""


@dataclass(frozen=True)
class MazeState:
    """A maze cell plus the accumulated cost of the path that reached it."""

    position: Position
    cost: float = field(default=0.0, compare=False)

    @property
    def row(self) -> int:
        return self.position.row

    @property
    def col(self) -> int:
        return self.position.col

    def __str__(self) -> str:
        return f"({self.position.row}, {self.position.col})"


class SearchableMaze(AbstractSearchable[MazeState]):
    """Exposes a :class:`GridMaze` as a searchable graph.

    Orthogonal moves cost 1. With ``diagonals=True`` the four diagonal moves
    are added at cost sqrt(2), each allowed only when one of the two
    orthogonal cells it cuts across is free.
    """

    def __init__(self, maze: GridMaze, *, diagonals: bool = False) -> None:
        self.maze = maze
        self.diagonals = diagonals

    def start_state(self) -> MazeState:
        return MazeState(self.maze.start, 0.0)

    def is_goal(self, state: MazeState) -> bool:
        return state.position == self.maze.goal

    def successors(self, state: MazeState) -> List[Tuple[MazeState, float]]:
        result: List[Tuple[MazeState, float]] = []
        origin = state.position
        for d_row, d_col in ORTHOGONAL_STEPS:
            target = origin.offset(d_row, d_col)
            if self.maze.is_free(target):
                result.append((MazeState(target, state.cost + ORTHOGONAL_COST), ORTHOGONAL_COST))
        if self.diagonals:
            for d_row, d_col in DIAGONAL_STEPS:
                target = origin.offset(d_row, d_col)
                if self.maze.is_free(target) and self.corner_is_open(origin, d_row, d_col):
                    result.append((MazeState(target, state.cost + DIAGONAL_COST), DIAGONAL_COST))
        return result

    def corner_is_open(self, origin: Position, d_row: int, d_col: int) -> bool:
        """True when a diagonal step has a free L-shaped route around it."""

        return self.maze.is_free(origin.offset(d_row, 0)) or self.maze.is_free(origin.offset(0, d_col))


__all__ = [
    "AbstractSearchable",
    "MazeState",
    "SearchableMaze",
    "ORTHOGONAL_COST",
    "DIAGONAL_COST",
    "DIAGONAL_STEPS",
]
