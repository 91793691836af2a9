"""Heuristic functions for A* maze search."""

from typing import Callable

from .errors import InvalidInputError
from .types import HeuristicId, Position


def manhattan_distance(start: Position, target: Position) -> int:
    """
    Manhattan (L1) distance heuristic.
    Admissible and consistent for 4-directional unit-cost movement.
    """
    return abs(start[0] - target[0]) + abs(start[1] - target[1])


def zero_heuristic(start: Position, target: Position) -> int:
    """
    Constant zero estimate.
    Reduces A* to uniform-cost search; trivially admissible.
    """
    return 0


# Mapping from heuristic IDs to functions
HEURISTICS: dict[HeuristicId, Callable[[Position, Position], int]] = {
    "manhattan": manhattan_distance,
    "zero": zero_heuristic,
}


def get_heuristic(heuristic_id: HeuristicId) -> Callable[[Position, Position], int]:
    """Get heuristic function by ID."""
    try:
        return HEURISTICS[heuristic_id]
    except KeyError:
        raise InvalidInputError(f"Unknown heuristic {heuristic_id!r}") from None
