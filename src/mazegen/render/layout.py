# src/mazegen/render/layout.py
# Pixel geometry shared by the Pillow and pygame renderers.
# Boxes are inclusive (x0, y0, x1, y1) tuples.

from typing import Iterator, List, Tuple

from ..config import RenderOptions
from ..generator import Maze

Box = Tuple[int, int, int, int]
XY = Tuple[int, int]


class Layout:
    def __init__(self, maze: Maze, opts: RenderOptions):
        self.maze = maze
        self.opts = opts
        self.cell = opts.cell_size
        self.ww = opts.wall_width
        self.base = opts.margin + opts.wall_width // 2

    @property
    def size(self) -> XY:
        o = self.opts
        return (
            self.maze.width * o.cell_size + 2 * o.margin + o.wall_width,
            self.maze.height * o.cell_size + 2 * o.margin + o.wall_width,
        )

    def line_x(self, col: int) -> int:
        return self.base + col * self.cell

    def line_y(self, row: int) -> int:
        return self.base + row * self.cell

    def _vline(self, col: int, row0: int, row1: int) -> Box:
        x0 = self.line_x(col) - self.ww // 2
        y0 = self.line_y(row0) - self.ww // 2
        y1 = self.line_y(row1) - self.ww // 2 + self.ww - 1
        return (x0, y0, x0 + self.ww - 1, y1)

    def _hline(self, row: int, col0: int, col1: int) -> Box:
        y0 = self.line_y(row) - self.ww // 2
        x0 = self.line_x(col0) - self.ww // 2
        x1 = self.line_x(col1) - self.ww // 2 + self.ww - 1
        return (x0, y0, x1, y0 + self.ww - 1)

    def wall_boxes(self) -> Iterator[Box]:
        """Outer rim first, then every wall still present."""
        m = self.maze
        g = m.grid
        yield self._hline(0, 0, g.width)
        yield self._hline(g.height, 0, g.width)
        yield self._vline(0, 0, g.height)
        yield self._vline(g.width, 0, g.height)
        for row in range(g.height):
            for col in range(g.width - 1):
                if not m.is_removed(g.vertical_wall(col, row)):
                    yield self._vline(col + 1, row, row + 1)
        for row in range(g.height - 1):
            for col in range(g.width):
                if not m.is_removed(g.horizontal_wall(col, row)):
                    yield self._hline(row + 1, col, col + 1)

    def cell_box(self, cell: int) -> Box:
        """Interior of a cell, clear of the surrounding wall lines."""
        col, row = self.maze.grid.coords(cell)
        x0 = self.line_x(col) - self.ww // 2 + self.ww
        y0 = self.line_y(row) - self.ww // 2 + self.ww
        x1 = self.line_x(col + 1) - self.ww // 2 - 1
        y1 = self.line_y(row + 1) - self.ww // 2 - 1
        return (x0, y0, x1, y1)

    def cell_center(self, cell: int) -> XY:
        x0, y0, x1, y1 = self.cell_box(cell)
        return ((x0 + x1) // 2, (y0 + y1) // 2)

    def route_points(self, route: List[int]) -> List[XY]:
        return [self.cell_center(c) for c in route]

    @property
    def route_width(self) -> int:
        return max(1, self.cell // 4)
