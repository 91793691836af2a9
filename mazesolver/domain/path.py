"""Path reconstruction and validation for A* search."""

from typing import List, Set

from .closed_set import ClosedSet
from .errors import BrokenChainError
from .neighbors import STEP_COST, is_adjacent
from .types import CostRecord, Grid, Position


def reconstruct_path(goal_record: CostRecord, closed_set: ClosedSet) -> List[Position]:
    """
    Reconstruct the path from the goal back to the start using parent links.
    Returns the path from start to goal (reversed from the parent chain).
    """
    path = [goal_record.position]
    seen: Set[Position] = {goal_record.position}
    parent = goal_record.parent

    while parent is not None:
        if parent in seen:
            raise BrokenChainError(f"Parent chain loops back to {parent}")
        record = closed_set.get(parent)
        if record is None:
            raise BrokenChainError(f"Parent {parent} was never closed")
        path.append(parent)
        seen.add(parent)
        parent = record.parent

    path.reverse()
    return path


def calculate_path_cost(path: List[Position]) -> int:
    """Calculate the total cost of a path."""
    if len(path) < 2:
        return 0
    return (len(path) - 1) * STEP_COST


def validate_path(path: List[Position], grid: Grid) -> bool:
    """
    Validate that a path is walkable, connected and never revisits a cell.
    Returns True if path is valid.
    """
    if not path:
        return False

    if any(not grid.is_passable(pos) for pos in path):
        return False

    if len(set(path)) != len(path):
        return False

    return all(is_adjacent(path[i - 1], path[i]) for i in range(1, len(path)))
