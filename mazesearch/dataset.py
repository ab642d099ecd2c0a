"""Maze dataset builder: batches of generated mazes with reference solutions."""

from __future__ import annotations

import argparse
import logging
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .base import AbstractMazeGenerator
from .maze.storage import PathLike
from .search.algorithms import Algorithm, algorithm_names
from .settings import load_settings
from .solver import solve

logger = logging.getLogger(__name__)


@dataclass
class MazeRecord:
    id: str
    rows: int
    cols: int
    cells: List[List[int]]
    start: Tuple[int, int]
    goal: Tuple[int, int]
    seed: int
    algorithm: str
    diagonals: bool
    solution_path: List[Tuple[int, int]]
    solution_cost: float
    expanded: int
    maze_path: Optional[str]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "rows": self.rows,
            "cols": self.cols,
            "cells": self.cells,
            "start": list(self.start),
            "goal": list(self.goal),
            "seed": self.seed,
            "algorithm": self.algorithm,
            "diagonals": self.diagonals,
            "solution_path": [list(cell) for cell in self.solution_path],
            "solution_cost": self.solution_cost,
            "expanded": self.expanded,
            "maze_path": self.maze_path,
        }


class MazeGenerator(AbstractMazeGenerator[MazeRecord]):
    """Generate maze records with a reference solution attached."""

    def __init__(
        self,
        output_dir: Optional[PathLike] = None,
        *,
        rows: int = 15,
        cols: int = 15,
        algorithm: Union[Algorithm, str] = Algorithm.BFS,
        diagonals: bool = False,
        seed: Optional[int] = None,
    ) -> None:
        super().__init__(output_dir, rows=rows, cols=cols, seed=seed)
        self.algorithm = Algorithm.parse(algorithm)
        self.diagonals = diagonals

    def create_maze(
        self,
        *,
        maze_id: Optional[str] = None,
        seed: Optional[int] = None,
    ) -> MazeRecord:
        maze_uuid = maze_id or str(uuid.uuid4())
        maze, maze_seed = self.carve(seed)
        solution = solve(maze, self.algorithm, self.diagonals)
        if not solution.found:
            raise RuntimeError("Failed to solve generated maze")

        return MazeRecord(
            id=maze_uuid,
            rows=maze.rows,
            cols=maze.cols,
            cells=maze.to_list(),
            start=tuple(maze.start),
            goal=tuple(maze.goal),
            seed=maze_seed,
            algorithm=self.algorithm.value,
            diagonals=self.diagonals,
            solution_path=[tuple(position) for position in solution.positions],
            solution_cost=solution.cost,
            expanded=solution.expanded,
            maze_path=self.store(maze, maze_uuid),
        )


__all__ = ["MazeGenerator", "MazeRecord"]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a dataset of solved grid mazes")
    parser.add_argument("count", type=int, help="Number of mazes to generate")
    parser.add_argument("--output-dir", type=Path, default=Path("data/maze"), help="Where to save mazes")
    parser.add_argument("--rows", type=int, default=None)
    parser.add_argument("--cols", type=int, default=None)
    parser.add_argument(
        "--algorithm",
        choices=algorithm_names(),
        default=None,
        help="Algorithm used for the reference solution",
    )
    parser.add_argument("--diagonals", action="store_true", default=None, help="Allow diagonal moves")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--settings", type=Path, default=None, help="JSON settings file with defaults")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    settings = load_settings(args.settings)
    generator = MazeGenerator(
        output_dir=args.output_dir,
        rows=args.rows if args.rows is not None else settings["rows"],
        cols=args.cols if args.cols is not None else settings["cols"],
        algorithm=args.algorithm or settings["algorithm"],
        diagonals=args.diagonals if args.diagonals is not None else settings["diagonals"],
        seed=args.seed if args.seed is not None else settings["seed"],
    )
    metadata_path = generator.output_dir / "mazes.json"
    records = generator.generate_dataset(args.count, metadata_path=metadata_path)
    logger.info("Wrote %d mazes to %s", len(records), metadata_path)


if __name__ == "__main__":
    main()
