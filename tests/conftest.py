from collections import deque

import pytest

from mazesolver.domain.types import Grid, Position
from mazesolver.utils.maze_parser import parse_maze


def reachable_region(grid: Grid, start: Position) -> set:
    """Open cells connected to ``start`` by 4-directional moves."""
    seen = {start}
    queue = deque([start])
    while queue:
        row, col = queue.popleft()
        for d_row, d_col in ((0, 1), (0, -1), (1, 0), (-1, 0)):
            nxt = Position(row + d_row, col + d_col)
            if grid.is_passable(nxt) and nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return seen


@pytest.fixture
def small_maze():
    return parse_maze("S.#\n..#\n#.G\n")


@pytest.fixture
def blocked_maze():
    return parse_maze(
        "S....\n"
        ".....\n"
        "#####\n"
        ".....\n"
        "....G\n"
    )
