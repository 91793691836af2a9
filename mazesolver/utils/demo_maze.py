"""Built-in demo maze used when no maze file is given."""

from .maze_parser import ParsedMaze, parse_maze

DEMO_MAZE = """\
############################################################
#..........................................................#
#.............................#............................#
#.............................#............................#
#.............................#............................#
#.......S.....................#............................#
#.............................#............................#
#.............................#............................#
#.............................#............................#
#.............................#............................#
#.............................#............................#
#.............................#............................#
#######.#######################################............#
#....#........#............................................#
#....#........#............................................#
#....##########............................................#
#..........................................................#
#..........................................................#
#..........................................................#
#..........................................................#
#..........................................................#
#...............................##############.............#
#...............................#........G...#.............#
#...............................#............#.............#
#...............................#............#.............#
#...............................#............#.............#
#...............................###########..#.............#
#..........................................................#
#..........................................................#
############################################################
"""


def demo_maze() -> ParsedMaze:
    return parse_maze(DEMO_MAZE)
