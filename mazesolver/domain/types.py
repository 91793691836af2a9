"""Core type definitions for the A* maze solver."""

from dataclasses import dataclass, field
from typing import FrozenSet, List, Literal, NamedTuple, Optional, Sequence

import numpy as np

from .errors import FinalizedRecordError, InvalidInputError


class Position(NamedTuple):
    """A grid cell. Equality, hashing and ordering use (row, col) only."""
    row: int
    col: int


# Cell states for visualization
NodeState = Literal[
    "empty", "wall", "start", "target",
    "open", "closed", "path", "current"
]

# Heuristic function identifiers
HeuristicId = Literal["manhattan", "zero"]


@dataclass
class CostRecord:
    """
    Search bookkeeping for one position.

    The parent is stored as a Position value rather than a reference to
    another record. After finalize() the record can no longer be changed.
    """
    position: Position
    g: int = 0  # Cost from start
    h: int = 0  # Heuristic estimate to goal
    parent: Optional[Position] = None
    _finalized: bool = field(default=False, init=False, repr=False, compare=False)

    def __setattr__(self, name, value):
        if getattr(self, "_finalized", False):
            raise FinalizedRecordError(
                f"Cannot set {name!r} on finalized record for {self.position}"
            )
        super().__setattr__(name, value)

    @property
    def f(self) -> int:
        """Priority used by the frontier."""
        return self.g + self.h

    @property
    def finalized(self) -> bool:
        return self._finalized

    def finalize(self):
        """Freeze the record once it leaves the frontier."""
        object.__setattr__(self, "_finalized", True)


@dataclass(frozen=True, eq=False)
class Grid:
    """
    Read-only view of a maze.

    ``walls`` is a 2-D boolean array where True marks an impassable cell.
    The array is copied and locked against writes on construction.
    """
    walls: np.ndarray

    def __post_init__(self):
        walls = np.array(self.walls, dtype=bool)
        if walls.ndim != 2 or walls.shape[0] == 0 or walls.shape[1] == 0:
            raise InvalidInputError(
                f"Grid must be a non-empty rectangle, got shape {walls.shape}"
            )
        walls.flags.writeable = False
        object.__setattr__(self, "walls", walls)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[bool]]) -> "Grid":
        """Build a grid from rows of wall flags, rejecting ragged input."""
        if not rows:
            raise InvalidInputError("Grid has no rows")
        width = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != width:
                raise InvalidInputError(
                    f"Row {index} has {len(row)} cells, expected {width}"
                )
        return cls(np.array(rows, dtype=bool).reshape(len(rows), width))

    @classmethod
    def empty(cls, rows: int, cols: int) -> "Grid":
        """Create a grid with no walls."""
        return cls(np.zeros((rows, cols), dtype=bool))

    @property
    def rows(self) -> int:
        return int(self.walls.shape[0])

    @property
    def cols(self) -> int:
        return int(self.walls.shape[1])

    def in_bounds(self, pos: Position) -> bool:
        """Check if position is within grid bounds."""
        row, col = pos
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_wall(self, pos: Position) -> bool:
        return bool(self.walls[pos[0], pos[1]])

    def is_passable(self, pos: Position) -> bool:
        """In bounds and not a wall."""
        return self.in_bounds(pos) and not self.is_wall(pos)

    def open_cell_count(self) -> int:
        return int(self.walls.size - np.count_nonzero(self.walls))


@dataclass
class AlgoConfig:
    """Configuration for the A* algorithm."""
    heuristic: HeuristicId = "manhattan"


@dataclass
class PathfindingResult:
    """
    Outcome of a search.

    ``found`` distinguishes the two cases: a found result carries the path
    from start to goal inclusive, a not-found result has ``path=None``.
    Both carry every position finalized during the search.
    """
    found: bool
    path: Optional[List[Position]] = None
    visited: FrozenSet[Position] = frozenset()

    @property
    def success(self) -> bool:
        """Whether pathfinding was successful."""
        return self.found and self.path is not None and len(self.path) > 0

    @property
    def path_length(self) -> int:
        """Number of cells on the path, start and goal included."""
        return len(self.path) if self.path else 0

    @property
    def path_cost(self) -> int:
        """Total movement cost of the path."""
        from .path import calculate_path_cost
        return calculate_path_cost(self.path or [])

    @property
    def nodes_explored(self) -> int:
        return len(self.visited)
