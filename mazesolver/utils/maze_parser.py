"""
Reading mazes from their text form.

Each row is a line of ``#`` (wall), ``.`` (open), ``S`` (start) and
``G`` (goal). The maze must be rectangular with exactly one start and
exactly one goal.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple, Union

from ..domain.errors import InvalidInputError
from ..domain.types import Grid, Position

WALL = "#"
OPEN = "."
START = "S"
GOAL = "G"

CELL_CHARS = {WALL, OPEN, START, GOAL}


@dataclass(frozen=True)
class ParsedMaze:
    """A grid together with its start, goal and source rows."""
    grid: Grid
    start: Position
    goal: Position
    rows: Tuple[str, ...]


def _split_rows(text: str) -> List[str]:
    lines = [line.rstrip("\r") for line in text.split("\n")]
    # Blank lines around the maze are tolerated, not inside it
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def parse_maze(text: str) -> ParsedMaze:
    """
    Parse a maze from text.

    Raises:
        InvalidInputError: If the maze is empty, ragged, contains unknown
            characters, or does not have exactly one start and one goal
    """
    rows = _split_rows(text)
    if not rows:
        raise InvalidInputError("Maze is empty")

    starts: List[Position] = []
    goals: List[Position] = []
    walls: List[List[bool]] = []

    for row_index, line in enumerate(rows):
        wall_row = []
        for col_index, char in enumerate(line):
            if char not in CELL_CHARS:
                raise InvalidInputError(
                    f"Unknown cell {char!r} at row {row_index}, column {col_index}"
                )
            if char == START:
                starts.append(Position(row_index, col_index))
            elif char == GOAL:
                goals.append(Position(row_index, col_index))
            wall_row.append(char == WALL)
        walls.append(wall_row)

    if len(starts) != 1:
        raise InvalidInputError(f"Maze needs exactly one start '{START}', found {len(starts)}")
    if len(goals) != 1:
        raise InvalidInputError(f"Maze needs exactly one goal '{GOAL}', found {len(goals)}")

    grid = Grid.from_rows(walls)
    return ParsedMaze(grid=grid, start=starts[0], goal=goals[0], rows=tuple(rows))


def load_maze(filepath: Union[str, Path]) -> ParsedMaze:
    """Load and parse a maze text file."""
    try:
        text = Path(filepath).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise InvalidInputError(f"Maze file {filepath} is not valid UTF-8 text") from e
    return parse_maze(text)
