"""Immutable grid maze model shared by the generator, storage and search adapter."""

from __future__ import annotations

from collections import deque
from typing import Iterable, List, NamedTuple, Sequence, Set, Tuple, Union

import numpy as np

from ..errors import CorruptMazeError

FREE = 0
WALL = 1

ORTHOGONAL_STEPS: Tuple[Tuple[int, int], ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))


class Position(NamedTuple):
    """A ``(row, col)`` cell coordinate; rows grow downward."""

    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> "Position":
        return Position(self.row + d_row, self.col + d_col)


PositionLike = Union[Position, Tuple[int, int], Sequence[int]]


def as_position(value: PositionLike) -> Position:
    """Coerce a ``(row, col)`` pair into a :class:`Position`."""

    if isinstance(value, Position):
        return value
    try:
        row, col = value
    except (TypeError, ValueError) as exc:
        raise CorruptMazeError(f"Expected a (row, col) pair, got {value!r}") from exc
    if isinstance(row, bool) or isinstance(col, bool):
        raise CorruptMazeError(f"Expected integer coordinates, got {value!r}")
    if not isinstance(row, (int, np.integer)) or not isinstance(col, (int, np.integer)):
        raise CorruptMazeError(f"Expected integer coordinates, got {value!r}")
    return Position(int(row), int(col))


class GridMaze:
    """Rectangular FREE/WALL cell matrix with a start and a goal cell.

    The matrix is stored as a read-only ``numpy.uint8`` array in row-major
    order. Instances never change after construction; editing helpers such as
    :meth:`with_cell` return a new maze.

    With ``strict=True`` (the default) the start and goal must sit on FREE
    cells. ``strict=False`` only keeps the shape and bounds checks, which is
    what hand-edited mazes go through.
    """

    __slots__ = ("_cells", "_start", "_goal")

    def __init__(
        self,
        cells: Union[np.ndarray, Sequence[Sequence[int]]],
        start: PositionLike,
        goal: PositionLike,
        *,
        strict: bool = True,
    ) -> None:
        self._cells = _freeze_cells(cells)
        self._start = as_position(start)
        self._goal = as_position(goal)
        for label, position in (("start", self._start), ("goal", self._goal)):
            if not self.in_bounds(position):
                raise CorruptMazeError(
                    f"{label} {tuple(position)} is outside a {self.rows}x{self.cols} maze"
                )
            if strict and self._cells[position] != FREE:
                raise CorruptMazeError(f"{label} {tuple(position)} is on a wall cell")

    # ------------------------------------------------------------------

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the cell matrix (FREE=0, WALL=1)."""

        return self._cells

    @property
    def start(self) -> Position:
        return self._start

    @property
    def goal(self) -> Position:
        return self._goal

    @property
    def rows(self) -> int:
        return int(self._cells.shape[0])

    @property
    def cols(self) -> int:
        return int(self._cells.shape[1])

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def in_bounds(self, position: PositionLike) -> bool:
        row, col = position
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_free(self, position: PositionLike) -> bool:
        """True for in-bounds FREE cells; out-of-bounds cells count as walls."""

        return self.in_bounds(position) and self._cells[tuple(position)] == FREE

    def __getitem__(self, position: PositionLike) -> int:
        if not self.in_bounds(position):
            raise IndexError(f"{tuple(position)} is outside a {self.rows}x{self.cols} maze")
        return int(self._cells[tuple(position)])

    def open_neighbors(self, position: PositionLike) -> List[Position]:
        """FREE orthogonal neighbours in the order up, right, down, left."""

        origin = as_position(position)
        return [
            origin.offset(d_row, d_col)
            for d_row, d_col in ORTHOGONAL_STEPS
            if self.is_free(origin.offset(d_row, d_col))
        ]

    def reachable_from(self, position: PositionLike) -> Set[Position]:
        """Flood fill over orthogonally adjacent FREE cells."""

        origin = as_position(position)
        if not self.is_free(origin):
            return set()
        seen = {origin}
        queue: deque[Position] = deque([origin])
        while queue:
            current = queue.popleft()
            for neighbor in self.open_neighbors(current):
                if neighbor not in seen:
                    seen.add(neighbor)
                    queue.append(neighbor)
        return seen

    def count_free_edges(self) -> int:
        """Number of orthogonally adjacent FREE/FREE cell pairs."""

        free = self._cells == FREE
        horizontal = np.count_nonzero(free[:, :-1] & free[:, 1:])
        vertical = np.count_nonzero(free[:-1, :] & free[1:, :])
        return int(horizontal + vertical)

    def is_perfect(self) -> bool:
        """True when the FREE cells form a single tree (connected, no loops)."""

        free_count = int(np.count_nonzero(self._cells == FREE))
        if free_count == 0:
            return False
        connected = len(self.reachable_from(self._start)) == free_count
        return connected and self.count_free_edges() == free_count - 1

    # ------------------------------------------------------------------

    def with_cell(self, position: PositionLike, value: int) -> "GridMaze":
        """Return a copy with one cell overwritten; endpoints are not re-checked."""

        if value not in (FREE, WALL):
            raise CorruptMazeError(f"Cell values must be {FREE} or {WALL}, got {value!r}")
        if not self.in_bounds(position):
            raise IndexError(f"{tuple(position)} is outside a {self.rows}x{self.cols} maze")
        cells = self._cells.copy()
        cells[tuple(position)] = value
        return GridMaze(cells, self._start, self._goal, strict=False)

    def to_list(self) -> List[List[int]]:
        return self._cells.tolist()

    def tobytes(self) -> bytes:
        return self._cells.tobytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridMaze):
            return NotImplemented
        return (
            self._start == other._start
            and self._goal == other._goal
            and self._cells.shape == other._cells.shape
            and bool(np.array_equal(self._cells, other._cells))
        )

    def __hash__(self) -> int:
        return hash((self._cells.shape, self._cells.tobytes(), self._start, self._goal))

    def __repr__(self) -> str:
        return (
            f"GridMaze(rows={self.rows}, cols={self.cols}, "
            f"start={tuple(self._start)}, goal={tuple(self._goal)})"
        )


def _freeze_cells(cells: Union[np.ndarray, Iterable[Iterable[int]]]) -> np.ndarray:
    try:
        raw = np.array(cells)
    except (TypeError, ValueError) as exc:
        raise CorruptMazeError("Maze cells must form a rectangular matrix") from exc
    if raw.ndim != 2:
        raise CorruptMazeError("Maze cells must form a rectangular matrix")
    if raw.shape[0] < 2 or raw.shape[1] < 2:
        raise CorruptMazeError(f"Maze must be at least 2x2, got {raw.shape[0]}x{raw.shape[1]}")
    if raw.dtype == np.bool_ or not np.issubdtype(raw.dtype, np.integer):
        raise CorruptMazeError(f"Maze cells must be integers, got dtype {raw.dtype}")
    if not np.isin(raw, (FREE, WALL)).all():
        raise CorruptMazeError(f"Maze cells must be {FREE} (free) or {WALL} (wall)")
    frozen = raw.astype(np.uint8)
    frozen.setflags(write=False)
    return frozen


__all__ = [
    "FREE",
    "WALL",
    "ORTHOGONAL_STEPS",
    "Position",
    "PositionLike",
    "as_position",
    "GridMaze",
]
