"""Solve grid mazes with any of the search algorithms."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Union

from .errors import MazeError
from .maze.grid import GridMaze
from .maze.storage import load_maze
from .search.algorithms import Algorithm, algorithm_names, search
from .search.heuristics import Heuristic, heuristic_for
from .search.searchable import SearchableMaze
from .search.solution import Solution

logger = logging.getLogger(__name__)


def solve(
    maze: GridMaze,
    algorithm: Union[Algorithm, str] = Algorithm.BEST_FIRST,
    diagonals_enabled: bool = False,
    heuristic: Union[Heuristic, str, None] = None,
) -> Solution:
    """Wrap ``maze`` in a fresh adapter and search it.

    ``heuristic`` may be a callable on states or the name of a built-in maze
    heuristic (``zero``, ``manhattan``, ``octile``); it only applies to
    best-first search. ``manhattan`` overestimates diagonal steps, so with
    ``diagonals_enabled`` it can return a costlier path than the optimum; a
    warning is logged in that case. An unreachable goal yields an empty
    Solution.
    """

    if isinstance(heuristic, str):
        if diagonals_enabled and heuristic.lower() == "manhattan":
            logger.warning(
                "manhattan is not admissible with diagonal moves; use octile for optimal paths"
            )
        heuristic = heuristic_for(heuristic, maze)
    searchable = SearchableMaze(maze, diagonals=diagonals_enabled)
    return search(searchable, algorithm, heuristic)


__all__ = ["solve"]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Solve a stored maze and print the path as JSON")
    parser.add_argument("maze", type=Path, help="Path to a maze JSON file")
    parser.add_argument(
        "--algorithm",
        choices=algorithm_names(),
        default=Algorithm.BEST_FIRST.value,
    )
    parser.add_argument("--diagonals", action="store_true", help="Allow diagonal moves")
    parser.add_argument(
        "--heuristic",
        type=str,
        default=None,
        help="Best-first heuristic: zero, manhattan or octile",
    )
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    try:
        maze = load_maze(args.maze)
        solution = solve(maze, args.algorithm, args.diagonals, args.heuristic)
    except MazeError as exc:
        logger.error("%s", exc)
        sys.exit(1)
    print(json.dumps(solution.to_dict(), indent=2))


if __name__ == "__main__":
    main()
