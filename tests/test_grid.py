# tests/test_grid.py
import pytest

from mazegen.errors import IndexOutOfRange
from mazegen.grid import Grid

SIZES = [(1, 1), (2, 1), (1, 2), (1, 6), (6, 1), (2, 2), (3, 2), (5, 4), (9, 7)]


def test_counts():
    g = Grid(3, 2)
    assert g.cell_count == 6
    assert g.vertical_wall_count == 4
    assert g.wall_count == 7          # 4 vertical + 3 horizontal
    assert Grid(1, 1).wall_count == 0
    assert Grid(2, 1).wall_count == 1
    assert Grid(1, 5).vertical_wall_count == 0


def test_wall_endpoints_3x2():
    g = Grid(3, 2)
    # vertical walls, row-major
    assert g.wall_endpoints(0) == (0, 1)
    assert g.wall_endpoints(1) == (1, 2)
    assert g.wall_endpoints(2) == (3, 4)
    assert g.wall_endpoints(3) == (4, 5)
    # horizontal walls
    assert g.wall_endpoints(4) == (0, 3)
    assert g.wall_endpoints(5) == (1, 4)
    assert g.wall_endpoints(6) == (2, 5)


def test_single_column_has_only_horizontal_walls():
    g = Grid(1, 4)
    assert [g.wall_endpoints(w) for w in range(g.wall_count)] == [(0, 1), (1, 2), (2, 3)]
    assert not any(g.is_vertical(w) for w in range(g.wall_count))


@pytest.mark.parametrize("w,h", SIZES)
def test_every_wall_separates_two_adjacent_cells_once(w, h):
    g = Grid(w, h)
    seen = set()
    for wall in range(g.wall_count):
        a, b = g.wall_endpoints(wall)
        assert 0 <= a < b < g.cell_count
        (ac, ar), (bc, br) = g.coords(a), g.coords(b)
        if g.is_vertical(wall):
            assert (br, bc) == (ar, ac + 1)
        else:
            assert (bc, br) == (ac, ar + 1)
        seen.add((a, b))
    assert len(seen) == g.wall_count


@pytest.mark.parametrize("w,h", SIZES)
def test_wall_lookup_by_position_matches_endpoints(w, h):
    g = Grid(w, h)
    for row in range(h):
        for col in range(w - 1):
            assert g.wall_endpoints(g.vertical_wall(col, row)) == (g.idx(col, row), g.idx(col + 1, row))
    for row in range(h - 1):
        for col in range(w):
            assert g.wall_endpoints(g.horizontal_wall(col, row)) == (g.idx(col, row), g.idx(col, row + 1))


def test_out_of_range_indices():
    g = Grid(3, 2)
    with pytest.raises(IndexOutOfRange):
        g.wall_endpoints(-1)
    with pytest.raises(IndexOutOfRange):
        g.wall_endpoints(g.wall_count)
    with pytest.raises(IndexOutOfRange):
        g.coords(6)
    with pytest.raises(IndexOutOfRange):
        g.vertical_wall(2, 0)        # last column has no right wall
    with pytest.raises(IndexOutOfRange):
        g.horizontal_wall(0, 1)      # last row has no wall below
    with pytest.raises(IndexError):  # also a plain IndexError
        Grid(1, 1).wall_endpoints(0)


def test_coords_row_major():
    g = Grid(4, 3)
    assert g.coords(0) == (0, 0)
    assert g.coords(5) == (1, 1)
    assert g.coords(11) == (3, 2)
    assert g.idx(3, 2) == 11
