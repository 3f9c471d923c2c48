# src/mazegen/grid.py
# Cell/wall index geometry for a width×height grid. Pure functions of the
# two dimensions; the outer boundary is implicit and has no wall index.
#
# Wall indices: first the vertical walls (cell ↔ right neighbour), row-major,
# (width-1)*height of them; then the horizontal walls (cell ↔ cell below),
# row-major, width*(height-1) of them.

from dataclasses import dataclass
from typing import Tuple

from .errors import IndexOutOfRange


@dataclass(frozen=True)
class Grid:
    width: int
    height: int

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    @property
    def vertical_wall_count(self) -> int:
        return (self.width - 1) * self.height

    @property
    def wall_count(self) -> int:
        return self.width * self.height * 2 - (self.width + self.height)

    def idx(self, col: int, row: int) -> int:
        if not (0 <= col < self.width and 0 <= row < self.height):
            raise IndexOutOfRange(f"cell ({col}, {row}) outside {self.width}x{self.height}")
        return row * self.width + col

    def check_cell(self, cell: int) -> int:
        if not (0 <= cell < self.cell_count):
            raise IndexOutOfRange(f"cell {cell} not in [0, {self.cell_count})")
        return cell

    def check_wall(self, wall: int) -> int:
        if wall < 0:
            raise IndexOutOfRange(f"wall {wall} is negative")
        if wall >= self.wall_count:
            raise IndexOutOfRange(f"wall {wall} not in [0, {self.wall_count})")
        return wall

    def coords(self, cell: int) -> Tuple[int, int]:
        """(col, row) of a cell index."""
        self.check_cell(cell)
        return cell % self.width, cell // self.width

    def is_vertical(self, wall: int) -> bool:
        return self.check_wall(wall) < self.vertical_wall_count

    def wall_endpoints(self, wall: int) -> Tuple[int, int]:
        """Return the two cells separated by `wall`, lower index first."""
        self.check_wall(wall)
        t1 = self.vertical_wall_count
        if wall < t1:
            col = wall % (self.width - 1)
            row = wall // (self.width - 1)
            a = row * self.width + col
            return a, a + 1
        a = wall - t1
        return a, a + self.width

    def vertical_wall(self, col: int, row: int) -> int:
        # Wall on the right-hand side of (col, row); the last column has none.
        if not (0 <= col < self.width - 1 and 0 <= row < self.height):
            raise IndexOutOfRange(f"no vertical wall right of ({col}, {row})")
        return row * (self.width - 1) + col

    def horizontal_wall(self, col: int, row: int) -> int:
        # Wall below (col, row); the last row has none.
        if not (0 <= col < self.width and 0 <= row < self.height - 1):
            raise IndexOutOfRange(f"no horizontal wall below ({col}, {row})")
        return self.vertical_wall_count + row * self.width + col
