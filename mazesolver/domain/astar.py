"""Core A* pathfinding algorithm implementation."""

import logging
from typing import Optional

from .closed_set import ClosedSet
from .errors import InvalidInputError
from .heuristics import get_heuristic
from .neighbors import STEP_COST, get_neighbors
from .path import reconstruct_path
from .priority_queue import PriorityQueue
from .types import AlgoConfig, CostRecord, Grid, PathfindingResult, Position

logger = logging.getLogger(__name__)


class SearchContext:
    """
    State of a single A* search.

    Each context owns its frontier and closed set, so nothing is shared
    between searches. Use step() to advance one expansion at a time (the
    viewer does this) or run() to search to completion.
    """

    def __init__(self, grid: Grid, start, goal, config: Optional[AlgoConfig] = None):
        self.grid = grid
        self.start = Position(*start)
        self.goal = Position(*goal)
        self.config = config or AlgoConfig()
        self._validate()

        self._heuristic = get_heuristic(self.config.heuristic)
        self.open_set = PriorityQueue()
        self.closed_set = ClosedSet()
        self.current: Optional[Position] = None
        self.result: Optional[PathfindingResult] = None

        start_record = CostRecord(self.start, g=0, h=self._heuristic(self.start, self.goal))
        self.open_set.insert(self.start, start_record)
        logger.debug("A* search %s -> %s on %dx%d grid",
                     self.start, self.goal, grid.rows, grid.cols)

    def _validate(self):
        for name, pos in (("Start", self.start), ("Goal", self.goal)):
            if not self.grid.in_bounds(pos):
                raise InvalidInputError(f"{name} position {pos} is out of bounds")
            if self.grid.is_wall(pos):
                raise InvalidInputError(f"{name} position {pos} is a wall")

    @property
    def is_complete(self) -> bool:
        return self.result is not None

    def step(self) -> Optional[PathfindingResult]:
        """
        Execute one step of the A* algorithm.
        Returns the PathfindingResult once the search is over, None otherwise.
        """
        if self.result is not None:
            return self.result

        if self.open_set.is_empty():
            self.result = PathfindingResult(found=False, visited=self.closed_set.positions())
            logger.debug("No path: closed %d positions", len(self.closed_set))
            return self.result

        current = self.open_set.extract_min()
        self.closed_set.add(current)
        self.current = current.position

        if current.position == self.goal:
            path = reconstruct_path(current, self.closed_set)
            self.result = PathfindingResult(
                found=True, path=path, visited=self.closed_set.positions()
            )
            logger.debug("Path found: %d cells, closed %d positions",
                         len(path), len(self.closed_set))
            return self.result

        tentative_g = current.g + STEP_COST
        for neighbor in get_neighbors(current.position, self.grid):
            if neighbor in self.closed_set:
                continue

            existing = self.open_set.get(neighbor)
            if existing is None:
                self.open_set.insert(neighbor, CostRecord(
                    neighbor,
                    g=tentative_g,
                    h=self._heuristic(neighbor, self.goal),
                    parent=current.position,
                ))
            elif tentative_g < existing.g:
                logger.debug("Decrease-key %s: g %d -> %d", neighbor, existing.g, tentative_g)
                self.open_set.update_priority(neighbor, CostRecord(
                    neighbor,
                    g=tentative_g,
                    h=self._heuristic(neighbor, self.goal),
                    parent=current.position,
                ))

        return None

    def run(self) -> PathfindingResult:
        """Run the search until it finds the goal or exhausts the frontier."""
        result = None
        while result is None:
            result = self.step()
        return result


def find_path(grid: Grid, start, goal, config: Optional[AlgoConfig] = None) -> PathfindingResult:
    """
    Run A* pathfinding from start to goal.

    Args:
        grid: Grid to search in
        start: Starting position (row, col)
        goal: Goal position (row, col)
        config: Algorithm configuration

    Returns:
        PathfindingResult with the path (if any) and the closed positions

    Raises:
        InvalidInputError: If start or goal is out of bounds or on a wall
    """
    return SearchContext(grid, start, goal, config).run()
