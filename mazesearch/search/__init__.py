"""Generic state-space search: searchable graphs, algorithms and solutions."""

__all__ = [
    "AbstractSearchable",
    "MazeState",
    "SearchableMaze",
    "Algorithm",
    "breadth_first_search",
    "depth_first_search",
    "best_first_search",
    "search",
    "algorithm_names",
    "Solution",
    "zero_heuristic",
    "manhattan",
    "octile",
]

from .searchable import AbstractSearchable, MazeState, SearchableMaze
from .algorithms import (
    Algorithm,
    breadth_first_search,
    depth_first_search,
    best_first_search,
    search,
    algorithm_names,
)
from .solution import Solution
from .heuristics import zero_heuristic, manhattan, octile
