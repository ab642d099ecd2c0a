"""Grid maze model, generation, persistence and path checking."""

__all__ = [
    "FREE",
    "WALL",
    "Position",
    "GridMaze",
    "generate",
    "maze_to_dict",
    "maze_from_dict",
    "save_maze",
    "load_maze",
    "PathCheck",
    "validate_path",
]

from .grid import FREE, WALL, Position, GridMaze
from .generator import generate
from .storage import maze_to_dict, maze_from_dict, save_maze, load_maze
from .validation import PathCheck, validate_path
