"""Perfect-maze generator producing grid mazes with a guaranteed start-goal path."""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple

import numpy as np

from ..errors import InvalidArgumentError, InvalidDimensionsError
from .grid import FREE, ORTHOGONAL_STEPS, WALL, GridMaze, Position, PositionLike, as_position

logger = logging.getLogger(__name__)

CARVE_STEPS = tuple((2 * d_row, 2 * d_col) for d_row, d_col in ORTHOGONAL_STEPS)


def generate(
    rows: int,
    cols: int,
    seed: Optional[int] = None,
    *,
    rng: Optional[random.Random] = None,
    start: Optional[PositionLike] = None,
    goal: Optional[PositionLike] = None,
) -> GridMaze:
    """Carve a perfect maze of ``rows`` x ``cols`` cells.

    A randomized depth-first carve runs from ``start`` (default top-left)
    over the cells sharing its row and column parity, opening the wall cell
    between every pair it joins. The free cells therefore form a spanning
    tree. ``goal`` (default bottom-right) is attached to that tree as a leaf
    when the carve did not already reach it.

    Passing ``rng`` takes precedence over ``seed``; with neither a fresh
    ``random.Random()`` is used.
    """

    if rows < 2 or cols < 2:
        raise InvalidDimensionsError(f"Maze needs at least 2 rows and 2 columns, got {rows}x{cols}")
    random_source = rng if rng is not None else random.Random(seed)
    origin = as_position(start) if start is not None else Position(0, 0)
    target = as_position(goal) if goal is not None else Position(rows - 1, cols - 1)
    for label, position in (("start", origin), ("goal", target)):
        if not (0 <= position.row < rows and 0 <= position.col < cols):
            raise InvalidArgumentError(f"{label} {tuple(position)} is outside a {rows}x{cols} maze")

    grid = np.full((rows, cols), WALL, dtype=np.uint8)
    _carve(grid, origin, random_source)
    _attach_goal(grid, target, random_source)

    maze = GridMaze(grid, origin, target)
    assert target in maze.reachable_from(origin), "carved maze must connect start and goal"
    logger.debug(
        "Generated %dx%d maze with %d free cells (start=%s, goal=%s)",
        rows,
        cols,
        int(np.count_nonzero(grid == FREE)),
        tuple(origin),
        tuple(target),
    )
    return maze


def _carve(grid: np.ndarray, origin: Position, rng: random.Random) -> None:
    rows, cols = grid.shape
    grid[origin] = FREE
    stack: List[Tuple[Position, List[Tuple[int, int]]]] = [(origin, _shuffled_steps(rng))]
    while stack:
        cell, steps = stack[-1]
        if not steps:
            stack.pop()
            continue
        d_row, d_col = steps.pop()
        nxt = cell.offset(d_row, d_col)
        if 0 <= nxt.row < rows and 0 <= nxt.col < cols and grid[nxt] == WALL:
            grid[cell.offset(d_row // 2, d_col // 2)] = FREE
            grid[nxt] = FREE
            stack.append((nxt, _shuffled_steps(rng)))


def _shuffled_steps(rng: random.Random) -> List[Tuple[int, int]]:
    steps = list(CARVE_STEPS)
    rng.shuffle(steps)
    return steps


def _free_neighbors(grid: np.ndarray, cell: Position) -> List[Position]:
    rows, cols = grid.shape
    result = []
    for d_row, d_col in ORTHOGONAL_STEPS:
        neighbor = cell.offset(d_row, d_col)
        if 0 <= neighbor.row < rows and 0 <= neighbor.col < cols and grid[neighbor] == FREE:
            result.append(neighbor)
    return result


def _attach_goal(grid: np.ndarray, goal: Position, rng: random.Random) -> None:
    """Open ``goal`` as a leaf of the carved tree, via one connector if needed."""

    if grid[goal] == FREE:
        return
    touching = _free_neighbors(grid, goal)
    if len(touching) == 1:
        grid[goal] = FREE
        return
    if not touching:
        rows, cols = grid.shape
        connectors = [
            goal.offset(d_row, d_col)
            for d_row, d_col in ORTHOGONAL_STEPS
            if 0 <= goal.row + d_row < rows and 0 <= goal.col + d_col < cols
        ]
        rng.shuffle(connectors)
        for connector in connectors:
            if len(_free_neighbors(grid, connector)) == 1:
                grid[connector] = FREE
                grid[goal] = FREE
                return
    raise InvalidArgumentError(
        f"goal {tuple(goal)} cannot be joined to the carved maze without creating a loop"
    )


__all__ = ["generate", "CARVE_STEPS"]
