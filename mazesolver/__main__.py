"""Command-line entry point for the A* maze solver."""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .app.render import render_report
from .domain.astar import find_path
from .domain.errors import InvalidInputError
from .domain.heuristics import HEURISTICS
from .domain.types import AlgoConfig
from .utils.calculator import find_factors, find_max, power
from .utils.demo_maze import demo_maze
from .utils.maze_parser import ParsedMaze, load_maze

logger = logging.getLogger("mazesolver")

EXIT_FOUND = 0
EXIT_NO_PATH = 1
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mazesolver",
        description="Find the shortest path through a maze with A* search",
    )
    parser.add_argument("--maze", type=str, help="Path to a maze text file (default: built-in demo)")
    parser.add_argument("--heuristic", choices=sorted(HEURISTICS), default="manhattan",
                        help="Heuristic used to order the frontier")
    parser.add_argument("--gui", action="store_true", help="Open the step-by-step viewer")
    parser.add_argument("--interval", type=int, default=30, help="Viewer step delay in milliseconds")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")

    subparsers = parser.add_subparsers(dest="command")
    calc = subparsers.add_parser("calc", help="Arithmetic helpers")
    calc_commands = calc.add_subparsers(dest="operation", required=True)

    power_parser = calc_commands.add_parser("power", help="BASE raised to EXPONENT")
    power_parser.add_argument("base", type=int)
    power_parser.add_argument("exponent", type=int)

    max_parser = calc_commands.add_parser("max", help="Largest of the given integers")
    max_parser.add_argument("values", type=int, nargs="+")

    factors_parser = calc_commands.add_parser("factors", help="Proper divisors of N")
    factors_parser.add_argument("n", type=int)

    return parser


def run_calc(args: argparse.Namespace) -> int:
    if args.operation == "power":
        print(power(args.base, args.exponent))
    elif args.operation == "max":
        print(find_max(args.values))
    else:
        print(" ".join(str(factor) for factor in find_factors(args.n)))
    return 0


def run_gui(maze: ParsedMaze, config: AlgoConfig, interval_ms: int) -> int:
    """Open the viewer window and block until it is closed."""
    # Disable DPI scaling so tiles map to whole pixels
    os.environ.setdefault('QT_AUTO_SCREEN_SCALE_FACTOR', '0')
    os.environ.setdefault('QT_SCALE_FACTOR', '1')
    os.environ.setdefault('QT_LOGGING_RULES', 'qt.qpa.backingstore=false')

    from PySide6.QtWidgets import QApplication
    from PySide6.QtCore import Qt

    QApplication.setHighDpiScaleFactorRoundingPolicy(Qt.HighDpiScaleFactorRoundingPolicy.Floor)
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("A* Maze Solver")

    # Import UI components (after QApplication is created)
    from .ui.main_window import MainWindow

    window = MainWindow(maze, config, interval_ms=interval_ms)
    window.show()
    return app.exec()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(levelname)s %(name)s: %(message)s")

    if args.command == "calc":
        return run_calc(args)

    config = AlgoConfig(heuristic=args.heuristic)
    try:
        maze = load_maze(args.maze) if args.maze else demo_maze()
        if args.gui:
            return run_gui(maze, config, args.interval)
        result = find_path(maze.grid, maze.start, maze.goal, config)
    except InvalidInputError as e:
        logger.error("Invalid maze: %s", e)
        return EXIT_INVALID
    except OSError as e:
        logger.error("Cannot read maze: %s", e)
        return EXIT_INVALID

    print(render_report(maze, result))
    return EXIT_FOUND if result.success else EXIT_NO_PATH


if __name__ == "__main__":
    sys.exit(main())
