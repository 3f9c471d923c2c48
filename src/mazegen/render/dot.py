# src/mazegen/render/dot.py
# Graphviz "dot" export of the maze's spanning tree: one node per cell,
# one undirected edge per removed wall. Entrance (cell 0) and exit (last
# cell) are drawn as filled double circles.

import logging
from typing import Iterator, TextIO

from ..generator import Maze

log = logging.getLogger(__name__)

ENTRANCE_ATTRS = 'shape = "doublecircle", style="filled", color = "skyblue", fillcolor = "skyblue"'
EXIT_ATTRS = 'shape = "doublecircle", style="filled", color = "green", fillcolor = "green"'


def dot_lines(maze: Maze) -> Iterator[str]:
    maze.check_generated()
    yield f"graph maze{maze.width}x{maze.height} {{"
    for cid in range(maze.grid.cell_count):
        if cid == maze.entrance:
            yield f'\tn{cid} [ label = "{cid}", {ENTRANCE_ATTRS} ];'
        elif cid == maze.exit:
            yield f'\tn{cid} [ label = "{cid}", {EXIT_ATTRS} ];'
        else:
            yield f'\tn{cid} [ label = "{cid}" ];'
    for lo, hi in maze.edges():
        yield f"\tn{lo} -- n{hi};"
    yield "}"


def format_dot(maze: Maze) -> str:
    return "".join(line + "\n" for line in dot_lines(maze))


def dump_paths(maze: Maze, out: TextIO) -> None:
    for line in dot_lines(maze):
        out.write(line + "\n")


def write_dot(maze: Maze, path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        dump_paths(maze, f)
    log.info("wrote %s", path)
