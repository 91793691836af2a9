"""Text report for a solved maze."""

from dataclasses import dataclass
from typing import List, Optional

from ..domain.types import PathfindingResult
from ..utils.maze_parser import GOAL, START, WALL, ParsedMaze


@dataclass
class RenderConfig:
    """Characters and messages used by the text report."""
    path_marker: str = "*"
    explored_marker: str = " "
    no_path_message: str = "No path found!"


def render_maze(maze: ParsedMaze, result: PathfindingResult,
                config: Optional[RenderConfig] = None) -> List[str]:
    """
    Draw the maze with explored cells blanked and path cells marked.
    Walls, start and goal keep their original characters.
    """
    config = config or RenderConfig()
    cells = [list(row) for row in maze.rows]
    keep = {WALL, START, GOAL}

    for row, col in result.visited:
        if cells[row][col] not in keep:
            cells[row][col] = config.explored_marker

    for row, col in result.path or []:
        if cells[row][col] not in (START, GOAL):
            cells[row][col] = config.path_marker

    return ["".join(row) for row in cells]


def render_report(maze: ParsedMaze, result: PathfindingResult,
                  config: Optional[RenderConfig] = None) -> str:
    """Full report: counts and drawing on success, a message otherwise."""
    config = config or RenderConfig()
    if not result.success:
        return config.no_path_message

    lines = [
        f"Path count: {result.path_length}",
        f"Searched squares count: {result.nodes_explored}",
    ]
    lines.extend(render_maze(maze, result, config))
    return "\n".join(lines)
