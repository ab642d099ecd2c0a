"""Score candidate paths against the mazes and reference solutions of a dataset."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple

from .base import AbstractMazeEvaluator
from .errors import MazeError
from .maze.grid import PositionLike, as_position
from .maze.storage import PathLike
from .maze.validation import validate_path

logger = logging.getLogger(__name__)

COST_TOLERANCE = 1e-9


@dataclass
class MazeEvaluationResult:
    maze_id: str
    valid: bool
    starts_at_start: bool
    reaches_goal: bool
    connected: bool
    stray_in_walls: bool
    out_of_bounds: bool
    path_length: int
    path_cost: Optional[float]
    reference_cost: Optional[float]
    within_reference: bool
    message: str

    def to_dict(self) -> dict:
        return {
            "maze_id": self.maze_id,
            "valid": self.valid,
            "starts_at_start": self.starts_at_start,
            "reaches_goal": self.reaches_goal,
            "connected": self.connected,
            "stray_in_walls": self.stray_in_walls,
            "out_of_bounds": self.out_of_bounds,
            "path_length": self.path_length,
            "path_cost": self.path_cost,
            "reference_cost": self.reference_cost,
            "within_reference": self.within_reference,
            "message": self.message,
        }


class MazeEvaluator(AbstractMazeEvaluator):
    """Evaluate candidate paths against the mazes in a metadata file."""

    def evaluate(
        self,
        maze_id: str,
        candidate_path: Sequence[PositionLike],
        *,
        allow_diagonals: Optional[bool] = None,
    ) -> MazeEvaluationResult:
        record = self.get_record(maze_id)
        maze = self.maze_for(maze_id)
        if allow_diagonals is None:
            allow_diagonals = bool(record.get("diagonals", False))
        check = validate_path(maze, candidate_path, allow_diagonals=allow_diagonals)

        reference_cost = record.get("solution_cost")
        within_reference = (
            check.is_valid
            and reference_cost is not None
            and check.cost <= float(reference_cost) + COST_TOLERANCE
        )

        if not candidate_path:
            message = "Candidate path is empty."
        elif check.out_of_bounds:
            message = "Candidate path leaves the maze."
        elif check.stray_in_walls:
            message = "Candidate path crosses walls."
        elif not check.starts_at_start:
            message = "Candidate path does not begin at the start cell."
        elif not check.reaches_goal:
            message = "Candidate path does not reach the goal."
        elif not check.connected:
            message = "Candidate path is not continuous from start to goal."
        elif within_reference:
            message = "Candidate path connects start to goal at reference cost."
        else:
            message = "Candidate path connects start to goal but is longer than the reference."

        return MazeEvaluationResult(
            maze_id=maze_id,
            valid=check.is_valid,
            starts_at_start=check.starts_at_start,
            reaches_goal=check.reaches_goal,
            connected=check.connected,
            stray_in_walls=check.stray_in_walls,
            out_of_bounds=check.out_of_bounds,
            path_length=len(candidate_path),
            path_cost=check.cost if check.is_valid else None,
            reference_cost=float(reference_cost) if reference_cost is not None else None,
            within_reference=within_reference,
            message=message,
        )


def read_candidate(path: PathLike) -> List[Tuple[int, int]]:
    """Read a candidate path: a JSON list of ``[row, col]`` or an object with ``path``."""

    payload: Any = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(payload, dict):
        payload = payload.get("path", [])
    if not isinstance(payload, list):
        raise ValueError("Candidate must be a list of [row, col] pairs")
    return [tuple(as_position(cell)) for cell in payload]


__all__ = [
    "MazeEvaluator",
    "MazeEvaluationResult",
    "read_candidate",
]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Evaluate a candidate path for a recorded maze")
    parser.add_argument("metadata", type=Path, help="Path to maze metadata JSON")
    parser.add_argument("maze_id", type=str, help="Identifier of the maze to evaluate")
    parser.add_argument("candidate", type=Path, help="JSON file containing the candidate path")
    parser.add_argument("--base-dir", type=Path, default=None)
    parser.add_argument(
        "--diagonals",
        action="store_true",
        default=None,
        help="Accept diagonal steps (defaults to the recorded setting)",
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
        evaluator = MazeEvaluator(args.metadata, base_dir=args.base_dir)
        candidate = read_candidate(args.candidate)
        result = evaluator.evaluate(args.maze_id, candidate, allow_diagonals=args.diagonals)
    except (MazeError, ValueError, KeyError) as exc:
        # ValueError also covers unreadable JSON and undecodable bytes.
        logger.error("%s", exc)
        sys.exit(1)
    print(json.dumps(result.to_dict(), indent=2))


if __name__ == "__main__":
    main()
