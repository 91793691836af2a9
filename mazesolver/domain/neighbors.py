"""Neighbor generation for 4-directional grid movement."""

from typing import List, Tuple

from .types import Grid, Position

# Right, left, down, up. The order is part of the deterministic output.
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))

STEP_COST = 1


def get_neighbors(pos: Position, grid: Grid) -> List[Position]:
    """Return the in-bounds, non-wall axis-aligned neighbors of ``pos``."""
    row, col = pos
    neighbors = []

    for d_row, d_col in DIRECTIONS:
        candidate = Position(row + d_row, col + d_col)
        if grid.is_passable(candidate):
            neighbors.append(candidate)

    return neighbors


def is_adjacent(a: Position, b: Position) -> bool:
    """True when ``a`` and ``b`` differ by one unit along exactly one axis."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1
