"""Headless maze session: the model layer an interactive front end drives.

A session owns at most one maze, the player's current cell and the last
solution. Generating or loading a maze puts the player back on the start
cell and forgets the previous solution.
"""

from __future__ import annotations

import logging
import random
from typing import Dict, Optional, Tuple, Union

from .errors import InvalidArgumentError, UnreachableGoalError
from .maze.generator import generate
from .maze.grid import GridMaze, Position
from .maze.storage import PathLike, load_maze, save_maze
from .search.algorithms import Algorithm
from .search.heuristics import Heuristic
from .search.solution import Solution
from .solver import solve

logger = logging.getLogger(__name__)

DIRECTIONS: Dict[str, Tuple[int, int]] = {
    "UP": (-1, 0),
    "DOWN": (1, 0),
    "LEFT": (0, -1),
    "RIGHT": (0, 1),
    "UP-LEFT": (-1, -1),
    "UP-RIGHT": (-1, 1),
    "DOWN-LEFT": (1, -1),
    "DOWN-RIGHT": (1, 1),
}


class MazeSession:
    """Generate, solve, save and load mazes and walk a player through them.

    The session is not thread-safe; a front end that solves in the
    background should hand the resulting Solution back to its own loop.
    """

    def __init__(self, *, rng: Optional[random.Random] = None) -> None:
        self._rng = rng
        self._maze: Optional[GridMaze] = None
        self._character: Optional[Position] = None
        self._solution: Optional[Solution] = None

    @property
    def maze(self) -> Optional[GridMaze]:
        return self._maze

    @property
    def solution(self) -> Optional[Solution]:
        return self._solution

    @property
    def character_position(self) -> Optional[Position]:
        return self._character

    @property
    def is_solved(self) -> bool:
        """True once the player stands on the goal cell."""
        return self._maze is not None and self._character == self._maze.goal

    def _require_maze(self) -> GridMaze:
        if self._maze is None:
            raise InvalidArgumentError("No maze loaded; generate or load one first")
        return self._maze

    def _reset(self, maze: GridMaze) -> GridMaze:
        self._maze = maze
        self._character = maze.start
        self._solution = None
        return maze

    def generate_maze(self, rows: int, cols: int, seed: Optional[int] = None) -> GridMaze:
        if seed is None and self._rng is not None:
            return self._reset(generate(rows, cols, rng=self._rng))
        return self._reset(generate(rows, cols, seed))

    def solve_maze(
        self,
        algorithm: Union[Algorithm, str] = Algorithm.BEST_FIRST,
        diagonals: bool = False,
        *,
        heuristic: Union[Heuristic, str, None] = None,
        require_path: bool = False,
    ) -> Solution:
        """Solve the current maze from its start cell and keep the result.

        With ``require_path`` an unreachable goal raises UnreachableGoalError
        instead of returning an empty Solution.
        """

        maze = self._require_maze()
        solution = solve(maze, algorithm, diagonals, heuristic)
        if require_path and not solution.found:
            raise UnreachableGoalError(
                f"goal {tuple(maze.goal)} is not reachable from {tuple(maze.start)}"
            )
        self._solution = solution
        return solution

    def save_maze(self, path: PathLike) -> None:
        save_maze(self._require_maze(), path)

    def load_maze(self, path: PathLike) -> GridMaze:
        return self._reset(load_maze(path))

    def move_character(self, direction: str, *, diagonals: bool = True) -> bool:
        """Try to step one cell in ``direction``.

        Returns True when the player moved. Blocked moves (walls, the maze
        edge, or a diagonal with both corner cells walled) leave the player
        in place and return False.
        """

        maze = self._require_maze()
        key = direction.strip().upper().replace("_", "-")
        if key not in DIRECTIONS:
            raise InvalidArgumentError(
                f"Unknown direction: {direction}. Available: {', '.join(DIRECTIONS)}"
            )
        d_row, d_col = DIRECTIONS[key]
        is_diagonal = d_row != 0 and d_col != 0
        if is_diagonal and not diagonals:
            raise InvalidArgumentError(f"Diagonal move {key} requested with diagonals disabled")

        current = self._character
        target = current.offset(d_row, d_col)
        if not maze.is_free(target):
            logger.debug("Blocked move %s from %s", key, tuple(current))
            return False
        if is_diagonal and not (
            maze.is_free(current.offset(d_row, 0)) or maze.is_free(current.offset(0, d_col))
        ):
            logger.debug("Blocked diagonal %s from %s: corner closed", key, tuple(current))
            return False
        self._character = target
        return True


__all__ = ["MazeSession", "DIRECTIONS"]
