"""Breadth-first, depth-first and best-first search over a searchable graph.

Each algorithm is a plain function taking an :class:`AbstractSearchable` and
returning a :class:`Solution`. All three keep a parent-pointer map keyed by
state identity, so every state enters the frontier a bounded number of times
and the search terminates on any finite graph, cyclic or not.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from collections import deque
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Set, Tuple, Union

from ..errors import InvalidArgumentError
from .heuristics import Heuristic, zero_heuristic
from .searchable import AbstractSearchable
from .solution import Solution, build_solution

logger = logging.getLogger(__name__)


class Algorithm(str, Enum):
    BFS = "bfs"
    DFS = "dfs"
    BEST_FIRST = "best_first"

    @classmethod
    def parse(cls, value: Union["Algorithm", str]) -> "Algorithm":
        """Accept an Algorithm or its value/name, case-insensitively."""

        if isinstance(value, Algorithm):
            return value
        key = str(value).strip().lower().replace("-", "_")
        for member in cls:
            if key in (member.value, member.name.lower()):
                return member
        available = ", ".join(member.value for member in cls)
        raise InvalidArgumentError(f"Unknown algorithm: {value}. Available: {available}")


def _start_state(searchable: Optional[AbstractSearchable], algorithm: Algorithm) -> Optional[Any]:
    if searchable is None:
        raise InvalidArgumentError("A searchable graph is required")
    start = searchable.start_state()
    if start is None:
        logger.warning("%s: searchable has no start state, nothing to search", algorithm.value)
    return start


def _finish(
    goal: Any,
    parents: Dict[Any, Optional[Any]],
    cost: float,
    expanded: int,
    algorithm: Algorithm,
) -> Solution:
    solution = build_solution(goal, parents, cost, expanded=expanded, algorithm=algorithm.value)
    logger.debug(
        "%s: reached goal, path length %d, cost %.3f, %d states expanded",
        algorithm.value,
        solution.length,
        solution.cost,
        expanded,
    )
    return solution


def _exhausted(expanded: int, algorithm: Algorithm) -> Solution:
    logger.debug("%s: frontier exhausted after %d states, no path", algorithm.value, expanded)
    return Solution.empty(expanded=expanded, algorithm=algorithm.value)


def breadth_first_search(searchable: AbstractSearchable) -> Solution:
    """FIFO frontier; fewest edges from start to goal.

    States are marked as discovered when enqueued, so each one is enqueued at
    most once and ties go to the first-discovered state.
    """

    start = _start_state(searchable, Algorithm.BFS)
    if start is None:
        return Solution.empty(algorithm=Algorithm.BFS.value)

    parents: Dict[Any, Optional[Any]] = {start: None}
    costs: Dict[Any, float] = {start: 0.0}
    queue: deque = deque([start])
    expanded = 0
    while queue:
        state = queue.popleft()
        expanded += 1
        if searchable.is_goal(state):
            return _finish(state, parents, costs[state], expanded, Algorithm.BFS)
        for successor, edge_cost in searchable.successors(state):
            if successor not in parents:
                parents[successor] = state
                costs[successor] = costs[state] + edge_cost
                queue.append(successor)
    return _exhausted(expanded, Algorithm.BFS)


def depth_first_search(searchable: AbstractSearchable) -> Solution:
    """LIFO frontier; returns some path, not necessarily the shortest.

    Successors are pushed in reverse so the first one listed is explored
    first.
    """

    start = _start_state(searchable, Algorithm.DFS)
    if start is None:
        return Solution.empty(algorithm=Algorithm.DFS.value)

    parents: Dict[Any, Optional[Any]] = {start: None}
    costs: Dict[Any, float] = {start: 0.0}
    stack: List[Any] = [start]
    expanded = 0
    while stack:
        state = stack.pop()
        expanded += 1
        if searchable.is_goal(state):
            return _finish(state, parents, costs[state], expanded, Algorithm.DFS)
        for successor, edge_cost in reversed(searchable.successors(state)):
            if successor not in parents:
                parents[successor] = state
                costs[successor] = costs[state] + edge_cost
                stack.append(successor)
    return _exhausted(expanded, Algorithm.DFS)


def best_first_search(
    searchable: AbstractSearchable,
    heuristic: Optional[Heuristic] = None,
) -> Solution:
    """Priority frontier ordered by accumulated cost plus heuristic.

    With the default zero heuristic this is uniform-cost search and returns a
    minimum-cost path for non-negative edge costs. Queue entries are
    ``(priority, cost, insertion order, state)``: lower cost wins ties on
    priority and earlier insertion wins ties on cost. Entries superseded by a
    cheaper route are skipped when popped.
    """

    start = _start_state(searchable, Algorithm.BEST_FIRST)
    if start is None:
        return Solution.empty(algorithm=Algorithm.BEST_FIRST.value)

    estimate = heuristic or zero_heuristic
    counter = itertools.count()
    parents: Dict[Any, Optional[Any]] = {start: None}
    best_cost: Dict[Any, float] = {start: 0.0}
    closed: Set[Any] = set()
    frontier: List[Tuple[float, float, int, Any]] = [(estimate(start), 0.0, next(counter), start)]
    expanded = 0
    while frontier:
        _, cost, _, state = heapq.heappop(frontier)
        if state in closed or cost > best_cost[state]:
            continue
        closed.add(state)
        expanded += 1
        if searchable.is_goal(state):
            return _finish(state, parents, cost, expanded, Algorithm.BEST_FIRST)
        for successor, edge_cost in searchable.successors(state):
            if successor in closed:
                continue
            new_cost = cost + edge_cost
            if successor not in best_cost or new_cost < best_cost[successor]:
                best_cost[successor] = new_cost
                parents[successor] = state
                heapq.heappush(
                    frontier,
                    (new_cost + estimate(successor), new_cost, next(counter), successor),
                )
    return _exhausted(expanded, Algorithm.BEST_FIRST)


_SEARCHES: Dict[Algorithm, Callable[[AbstractSearchable], Solution]] = {
    Algorithm.BFS: breadth_first_search,
    Algorithm.DFS: depth_first_search,
    Algorithm.BEST_FIRST: best_first_search,
}


def search(
    searchable: AbstractSearchable,
    algorithm: Union[Algorithm, str] = Algorithm.BEST_FIRST,
    heuristic: Optional[Heuristic] = None,
) -> Solution:
    """Run the selected algorithm against ``searchable``."""

    kind = Algorithm.parse(algorithm)
    if kind is Algorithm.BEST_FIRST:
        return best_first_search(searchable, heuristic)
    if heuristic is not None:
        raise InvalidArgumentError(f"{kind.value} does not take a heuristic")
    return _SEARCHES[kind](searchable)


def algorithm_names() -> List[str]:
    return [member.value for member in Algorithm]


__all__ = [
    "Algorithm",
    "breadth_first_search",
    "depth_first_search",
    "best_first_search",
    "search",
    "algorithm_names",
]
