# src/mazegen/render/ascii.py
# Plain-text maze picture:
#   +-+-+        corners '+', horizontal walls '-', vertical walls '|',
#   |   |        removed walls are blanks; the outer rim is always closed.
#   + +-+
#   | | |
#   +-+-+

import sys
from typing import List, Optional, TextIO

from ..generator import Maze


def wall_str(maze: Maze, wall: int) -> str:
    if maze.is_removed(wall):
        return " "
    return "|" if maze.grid.is_vertical(wall) else "-"


def format_lines(maze: Maze) -> List[str]:
    maze.check_generated()
    g = maze.grid
    rim = "+" + "-+" * g.width
    lines = [rim]
    for row in range(g.height):
        cells = "".join(" " + wall_str(maze, g.vertical_wall(col, row)) for col in range(g.width - 1))
        lines.append("|" + cells + " |")
        if row < g.height - 1:
            below = "".join(wall_str(maze, g.horizontal_wall(col, row)) + "+" for col in range(g.width))
            lines.append("+" + below)
    lines.append(rim)
    return lines


def format_maze(maze: Maze) -> str:
    return "\n".join(format_lines(maze)) + "\n"


def print_maze(maze: Maze, out: Optional[TextIO] = None) -> None:
    (out or sys.stdout).write(format_maze(maze))
