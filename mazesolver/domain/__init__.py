"""Framework-agnostic A* search over grid mazes."""

from .astar import SearchContext, find_path
from .errors import (
    BrokenChainError, DuplicateEntryError, EmptyFrontierError,
    FinalizedRecordError, FrontierError, InvalidInputError,
    MazeSolverError, NotFoundError,
)
from .types import AlgoConfig, CostRecord, Grid, PathfindingResult, Position

__all__ = [
    "SearchContext", "find_path",
    "BrokenChainError", "DuplicateEntryError", "EmptyFrontierError",
    "FinalizedRecordError", "FrontierError", "InvalidInputError",
    "MazeSolverError", "NotFoundError",
    "AlgoConfig", "CostRecord", "Grid", "PathfindingResult", "Position",
]
