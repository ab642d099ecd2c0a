"""Grid maze generation and pluggable state-space search."""

__all__ = [
    "AbstractMazeGenerator",
    "AbstractMazeEvaluator",
    "MazeError",
    "InvalidDimensionsError",
    "CorruptMazeError",
    "InvalidArgumentError",
    "UnreachableGoalError",
    "FREE",
    "WALL",
    "Position",
    "GridMaze",
    "generate",
    "save_maze",
    "load_maze",
    "MazeEvaluator",
    "MazeEvaluationResult",
    "validate_path",
    "AbstractSearchable",
    "MazeState",
    "SearchableMaze",
    "Algorithm",
    "search",
    "Solution",
    "solve",
    "MazeGenerator",
    "MazeRecord",
    "MazeSession",
]

from .errors import (
    MazeError,
    InvalidDimensionsError,
    CorruptMazeError,
    InvalidArgumentError,
    UnreachableGoalError,
)
from .maze import (
    FREE,
    WALL,
    Position,
    GridMaze,
    generate,
    save_maze,
    load_maze,
    validate_path,
)
from .search import AbstractSearchable, MazeState, SearchableMaze, Algorithm, search, Solution
from .solver import solve
from .dataset import MazeGenerator, MazeRecord
from .evaluation import MazeEvaluator, MazeEvaluationResult
from .session import MazeSession
from .base import AbstractMazeGenerator, AbstractMazeEvaluator
