"""Shared plumbing for maze datasets.

A dataset is a JSON list of maze records. Every record carries an ``id``, the
maze itself (``rows``, ``cols``, ``cells``, ``start``, ``goal``) and optionally
a ``maze_path`` pointing at a stored copy of the same maze. Builders derive
from :class:`AbstractMazeGenerator`; scorers derive from
:class:`AbstractMazeEvaluator`.
"""

from __future__ import annotations

import json
import logging
import random
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Generic, Iterable, List, Optional, Tuple, TypeVar

from .errors import CorruptMazeError, InvalidDimensionsError
from .maze.generator import generate
from .maze.grid import GridMaze
from .maze.storage import PathLike, load_maze, maze_from_dict, save_maze

RecordT = TypeVar("RecordT")

logger = logging.getLogger(__name__)


def read_metadata(path: PathLike) -> List[Dict[str, Any]]:
    """Load a dataset file, which must hold a JSON list of record objects."""

    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, list) or not all(isinstance(record, dict) for record in raw):
        raise CorruptMazeError(f"{path} must hold a list of maze records")
    return raw


class AbstractMazeGenerator(ABC, Generic[RecordT]):
    """Builds maze records of one fixed size from a seeded random source.

    The builder draws one seed per maze, so a seeded builder reproduces its
    whole dataset and any single maze can be regenerated from its record.
    With ``output_dir`` each maze is also stored under ``output_dir/mazes``.
    """

    def __init__(
        self,
        output_dir: Optional[PathLike] = None,
        *,
        rows: int,
        cols: int,
        seed: Optional[int] = None,
    ) -> None:
        if rows < 2 or cols < 2:
            raise InvalidDimensionsError(f"Maze needs at least 2 rows and 2 columns, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self._rng = random.Random(seed)
        self.output_dir = Path(output_dir) if output_dir is not None else None
        self.maze_dir = self.output_dir / "mazes" if self.output_dir is not None else None
        if self.maze_dir is not None:
            self.maze_dir.mkdir(parents=True, exist_ok=True)

    @abstractmethod
    def create_maze(self, *, maze_id: Optional[str] = None, seed: Optional[int] = None) -> RecordT:
        """Build one record; ``seed`` pins the maze, otherwise one is drawn."""

    def create_random_maze(self) -> RecordT:
        return self.create_maze()

    def carve(self, seed: Optional[int] = None) -> Tuple[GridMaze, int]:
        """Generate a maze of the builder's size and return it with its seed."""

        maze_seed = seed if seed is not None else self._rng.randrange(2**32)
        return generate(self.rows, self.cols, maze_seed), maze_seed

    def store(self, maze: GridMaze, maze_id: str) -> Optional[str]:
        """Save ``maze`` beside the dataset; the path is relative to ``output_dir``."""

        if self.maze_dir is None:
            return None
        saved = save_maze(maze, self.maze_dir / f"{maze_id}.json")
        return saved.relative_to(self.output_dir).as_posix()

    def generate_dataset(
        self,
        count: int,
        *,
        metadata_path: Optional[PathLike] = None,
        append: bool = True,
    ) -> List[RecordT]:
        records = [self.create_random_maze() for _ in range(count)]
        logger.debug("Generated %d %dx%d maze records", len(records), self.rows, self.cols)
        if metadata_path is not None:
            self.write_metadata(records, metadata_path, append=append)
        return records

    def write_metadata(
        self,
        records: Iterable[RecordT],
        metadata_path: PathLike,
        *,
        append: bool = True,
    ) -> None:
        """Write records to ``metadata_path``, after any already there when appending.

        Records must provide ``to_dict()``. An id that is already present in
        the file is rejected instead of silently shadowing the older maze.
        """

        path = Path(metadata_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        existing = read_metadata(path) if append and path.exists() else []
        seen = {str(record.get("id")) for record in existing}
        payload = []
        for record in records:
            entry = record.to_dict()
            if str(entry["id"]) in seen:
                raise ValueError(f"Duplicate maze id '{entry['id']}' for {path}")
            seen.add(str(entry["id"]))
            payload.append(entry)
        path.write_text(json.dumps(existing + payload, indent=2), encoding="utf-8")
        logger.debug("Wrote %d records (%d kept) to %s", len(payload), len(existing), path)


class AbstractMazeEvaluator(ABC):
    """Indexes a dataset file and rebuilds every recorded maze up front.

    A record's stored ``maze_path`` wins over its inline cells; relative
    paths resolve against ``base_dir`` (the metadata file's directory by
    default). Any record that does not describe a valid maze fails the
    constructor with :class:`CorruptMazeError`.
    """

    def __init__(
        self,
        metadata_path: PathLike,
        *,
        base_dir: Optional[PathLike] = None,
    ) -> None:
        self.metadata_path = Path(metadata_path)
        if not self.metadata_path.exists():
            raise FileNotFoundError(f"Metadata file not found: {self.metadata_path}")
        self.base_dir = Path(base_dir) if base_dir is not None else self.metadata_path.parent
        self._records: Dict[str, Dict[str, Any]] = {}
        self._mazes: Dict[str, GridMaze] = {}
        for record in read_metadata(self.metadata_path):
            self._index(record)
        logger.debug("Indexed %d mazes from %s", len(self._records), self.metadata_path)

    def _index(self, record: Dict[str, Any]) -> None:
        maze_id = record.get("id")
        if not maze_id:
            raise CorruptMazeError(f"A record in {self.metadata_path} has no 'id'")
        maze_id = str(maze_id)
        if maze_id in self._records:
            raise CorruptMazeError(f"Duplicate maze id '{maze_id}' in {self.metadata_path}")
        maze_path = record.get("maze_path")
        if maze_path:
            maze = load_maze(self.resolve_path(maze_path))
        else:
            maze = maze_from_dict(record)
        self._records[maze_id] = record
        self._mazes[maze_id] = maze

    @property
    def records(self) -> Dict[str, Dict[str, Any]]:
        return self._records

    def get_record(self, maze_id: str) -> Dict[str, Any]:
        try:
            return self._records[maze_id]
        except KeyError as exc:
            raise KeyError(f"Maze id '{maze_id}' not found in metadata") from exc

    def maze_for(self, maze_id: str) -> GridMaze:
        self.get_record(maze_id)
        return self._mazes[maze_id]

    def resolve_path(self, path_value: object) -> Path:
        candidate = Path(str(path_value))
        if not candidate.is_absolute():
            candidate = self.base_dir / candidate
        return candidate

    @abstractmethod
    def evaluate(self, maze_id: str, *args, **kwargs):
        """Score a candidate answer for the given maze."""


__all__ = [
    "AbstractMazeGenerator",
    "AbstractMazeEvaluator",
    "read_metadata",
]
