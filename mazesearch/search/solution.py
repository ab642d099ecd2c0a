"""Search results and parent-pointer path reconstruction."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..maze.grid import Position


@dataclass(frozen=True)
class Solution:
    """Result of one search call.

    Attributes:
        path: States in start to goal order; empty when the goal is unreachable
        cost: Sum of edge costs along ``path`` (``math.inf`` when empty)
        expanded: Number of states expanded by the search (diagnostic)
        algorithm: Name of the algorithm that produced the result

    Two solutions are equal when their paths match state by state and their
    costs are equal; ``expanded`` and ``algorithm`` are informational.
    """

    path: Tuple[Any, ...] = ()
    cost: float = math.inf
    expanded: int = field(default=0, compare=False)
    algorithm: str = field(default="", compare=False)

    @classmethod
    def empty(cls, *, expanded: int = 0, algorithm: str = "") -> "Solution":
        return cls(path=(), cost=math.inf, expanded=expanded, algorithm=algorithm)

    @property
    def found(self) -> bool:
        return len(self.path) > 0

    @property
    def length(self) -> int:
        """Number of states on the path, start and goal included."""
        return len(self.path)

    @property
    def positions(self) -> List[Position]:
        """Path projected onto grid positions for states that carry one."""
        return [getattr(state, "position", state) for state in self.path]

    def to_dict(self) -> dict:
        return {
            "algorithm": self.algorithm,
            "found": self.found,
            "path": [list(position) for position in self.positions],
            "cost": self.cost if self.found else None,
            "expanded": self.expanded,
        }


def reconstruct_path(goal: Any, parents: Mapping[Any, Optional[Any]]) -> Tuple[Any, ...]:
    """Walk parent pointers from ``goal`` back to the root and reverse."""

    path: List[Any] = []
    node: Optional[Any] = goal
    while node is not None:
        path.append(node)
        node = parents[node]
    path.reverse()
    return tuple(path)


def build_solution(
    goal: Any,
    parents: Dict[Any, Optional[Any]],
    cost: float,
    *,
    expanded: int,
    algorithm: str,
) -> Solution:
    return Solution(
        path=reconstruct_path(goal, parents),
        cost=float(cost),
        expanded=expanded,
        algorithm=algorithm,
    )


__all__ = ["Solution", "reconstruct_path", "build_solution"]
