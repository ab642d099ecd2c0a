"""JSON persistence for grid mazes.

A stored maze is a single JSON object::

    {"rows": 5, "cols": 5, "cells": [[0, 1, ...], ...], "start": [0, 0], "goal": [4, 4]}

Everything read from disk goes through :func:`maze_from_dict`, which turns
any shape or value problem into :class:`~mazesearch.errors.CorruptMazeError`
before a :class:`GridMaze` is handed to the rest of the library.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from ..errors import CorruptMazeError
from .grid import GridMaze

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
REQUIRED_KEYS = ("rows", "cols", "cells", "start", "goal")


def maze_to_dict(maze: GridMaze) -> Dict[str, Any]:
    return {
        "rows": maze.rows,
        "cols": maze.cols,
        "cells": maze.to_list(),
        "start": list(maze.start),
        "goal": list(maze.goal),
    }


def maze_from_dict(payload: Mapping[str, Any]) -> GridMaze:
    """Build a maze from its stored form, rejecting anything malformed."""

    if not isinstance(payload, Mapping):
        raise CorruptMazeError(f"Stored maze must be a JSON object, got {type(payload).__name__}")
    missing = [key for key in REQUIRED_KEYS if key not in payload]
    if missing:
        raise CorruptMazeError(f"Stored maze is missing keys: {', '.join(missing)}")

    rows, cols = payload["rows"], payload["cols"]
    if not isinstance(rows, int) or not isinstance(cols, int):
        raise CorruptMazeError("Stored maze 'rows' and 'cols' must be integers")
    cells = payload["cells"]
    if not isinstance(cells, list) or len(cells) != rows:
        raise CorruptMazeError(f"Stored maze declares {rows} rows but the matrix does not match")
    for index, row in enumerate(cells):
        if not isinstance(row, list) or len(row) != cols:
            raise CorruptMazeError(
                f"Stored maze declares {cols} columns but row {index} does not match"
            )
    return GridMaze(cells, payload["start"], payload["goal"])


def save_maze(maze: GridMaze, path: PathLike) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(maze_to_dict(maze)), encoding="utf-8")
    logger.debug("Saved %r to %s", maze, target)
    return target


def load_maze(path: PathLike) -> GridMaze:
    source = Path(path)
    try:
        payload = json.loads(source.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise CorruptMazeError(f"{source} is not UTF-8 text: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise CorruptMazeError(f"{source} is not valid JSON: {exc}") from exc
    maze = maze_from_dict(payload)
    logger.debug("Loaded %r from %s", maze, source)
    return maze


__all__ = ["PathLike", "maze_to_dict", "maze_from_dict", "save_maze", "load_maze"]
