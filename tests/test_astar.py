import pytest

from mazesolver.domain.astar import SearchContext, find_path
from mazesolver.domain.errors import FinalizedRecordError, InvalidInputError
from mazesolver.domain.heuristics import manhattan_distance
from mazesolver.domain.path import validate_path
from mazesolver.domain.types import AlgoConfig, Grid, Position
from mazesolver.utils.demo_maze import demo_maze
from mazesolver.utils.maze_parser import parse_maze

from conftest import reachable_region

P = Position


def test_three_by_three_open_grid():
    result = find_path(Grid.empty(3, 3), (0, 0), (2, 2))
    assert result.found
    assert result.path_length == 5
    assert result.path_cost == 4
    assert 5 <= result.nodes_explored <= 9


def test_tie_break_fixes_the_chosen_path():
    result = find_path(Grid.empty(3, 3), (0, 0), (2, 2))
    assert result.path == [P(0, 0), P(0, 1), P(0, 2), P(1, 2), P(2, 2)]
    assert result.visited == frozenset(result.path)


@pytest.mark.parametrize("shape, start, goal", [
    ((1, 6), (0, 0), (0, 5)),
    ((5, 5), (4, 4), (0, 0)),
    ((4, 7), (3, 1), (0, 6)),
    ((6, 3), (2, 2), (2, 0)),
])
def test_open_grid_path_length_is_manhattan_plus_one(shape, start, goal):
    result = find_path(Grid.empty(*shape), start, goal)
    assert result.path_length == manhattan_distance(start, goal) + 1


def test_path_is_connected_and_simple(small_maze):
    result = find_path(small_maze.grid, small_maze.start, small_maze.goal)
    assert result.path[0] == small_maze.start
    assert result.path[-1] == small_maze.goal
    assert validate_path(result.path, small_maze.grid)


def test_visited_bounds_on_demo_maze():
    maze = demo_maze()
    result = find_path(maze.grid, maze.start, maze.goal)
    assert result.found
    assert validate_path(result.path, maze.grid)
    assert result.path_length <= result.nodes_explored <= maze.grid.open_cell_count()


def test_zero_heuristic_finds_equally_short_path():
    maze = demo_maze()
    astar = find_path(maze.grid, maze.start, maze.goal)
    uniform = find_path(maze.grid, maze.start, maze.goal, AlgoConfig(heuristic="zero"))
    assert uniform.path_length == astar.path_length
    assert uniform.nodes_explored >= astar.nodes_explored


def test_start_equals_goal():
    result = find_path(Grid.empty(4, 4), (2, 1), (2, 1))
    assert result.found
    assert result.path == [P(2, 1)]
    assert result.visited == frozenset({P(2, 1)})


def test_wall_row_separates_start_and_goal(blocked_maze):
    result = find_path(blocked_maze.grid, blocked_maze.start, blocked_maze.goal)
    assert not result.found
    assert result.path is None
    assert result.visited == reachable_region(blocked_maze.grid, blocked_maze.start)
    assert result.nodes_explored == 10


def test_enclosed_goal_explores_whole_region():
    maze = parse_maze(
        "S..#...\n"
        ".#.#.#.\n"
        "...#.G.\n"
    )
    result = find_path(maze.grid, maze.start, maze.goal)
    assert not result.found
    assert result.visited == reachable_region(maze.grid, maze.start)


def test_repeated_searches_are_identical():
    maze = demo_maze()
    first = find_path(maze.grid, maze.start, maze.goal)
    second = find_path(maze.grid, maze.start, maze.goal)
    assert first.path == second.path
    assert first.visited == second.visited


def test_walls_are_never_visited(small_maze):
    result = find_path(small_maze.grid, small_maze.start, small_maze.goal)
    assert all(not small_maze.grid.is_wall(pos) for pos in result.visited)


@pytest.mark.parametrize("start, goal", [
    ((0, 2), (2, 2)),   # start on a wall
    ((0, 0), (2, 0)),   # goal on a wall
    ((3, 0), (2, 2)),   # start below the grid
    ((0, 0), (0, -1)),  # goal left of the grid
])
def test_invalid_endpoints_rejected(small_maze, start, goal):
    with pytest.raises(InvalidInputError):
        find_path(small_maze.grid, start, goal)


def test_unknown_heuristic_rejected():
    with pytest.raises(InvalidInputError):
        find_path(Grid.empty(2, 2), (0, 0), (1, 1), AlgoConfig(heuristic="euclidean"))


def test_step_by_step_matches_run(small_maze):
    context = SearchContext(small_maze.grid, small_maze.start, small_maze.goal)
    assert not context.is_complete
    assert context.step() is None
    assert context.current == small_maze.start
    assert len(context.closed_set) == 1
    assert len(context.open_set) == 2

    result = context.run()
    assert context.is_complete
    assert context.step() is result
    assert result.path == find_path(small_maze.grid, small_maze.start, small_maze.goal).path


def test_closed_records_are_frozen(small_maze):
    context = SearchContext(small_maze.grid, small_maze.start, small_maze.goal)
    context.run()
    record = context.closed_set.get(small_maze.goal)
    assert record.g == 4
    assert record.parent == P(2, 1)
    with pytest.raises(FinalizedRecordError):
        record.g = 0


def test_contexts_do_not_share_state():
    grid = Grid.empty(3, 3)
    first = SearchContext(grid, (0, 0), (2, 2))
    second = SearchContext(grid, (2, 2), (0, 0))
    first.run()
    assert len(second.closed_set) == 0
    assert second.open_set.contains(P(2, 2))
