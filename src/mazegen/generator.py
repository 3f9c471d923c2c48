# src/mazegen/generator.py
# Perfect-maze generator: random wall removal over the grid graph until the
# union-find partition collapses to a single group (randomized Kruskal, with
# wall draws sampled with replacement).

from __future__ import annotations

import logging
from collections import deque
from typing import Iterator, List, Optional, Tuple

from .config import GENERATOR_DEFAULTS, GeneratorOptions
from .errors import AlgorithmInvariantViolated, InvalidDimensions, MazeError
from .grid import Grid
from .partition import Partition
from .rng import PyRandom, RandomSource

log = logging.getLogger(__name__)

Edge = Tuple[int, int]


def _check_dimension(name: str, value) -> int:
    # bool is an int subclass; True/False are not dimensions.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDimensions(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise InvalidDimensions(f"{name} must be >= 1, got {value}")
    return value


class Maze:
    """
    A width×height maze. Construction allocates the grid with every wall
    present; `generate` removes walls until every cell is reachable from
    every other through exactly one path.

    After a successful `generate` the maze is read-only: renderers use
    `walls`, `paths`, `edges()` and the geometry on `grid`.
    """

    def __init__(self, width: int, height: int, options: Optional[GeneratorOptions] = None):
        _check_dimension("width", width)
        _check_dimension("height", height)
        self.options = options or GENERATOR_DEFAULTS
        self.grid = Grid(width, height)
        self.partition = Partition(self.grid.cell_count)
        self._walls: List[bool] = [False] * self.grid.wall_count   # True = removed
        self._paths: List[List[int]] = [[] for _ in range(self.grid.cell_count)]
        self.iterations = 0
        self.generated = False
        self.failed = False

    def __repr__(self) -> str:
        state = "generated" if self.generated else ("failed" if self.failed else "new")
        return f"Maze({self.width}x{self.height}, {state})"

    # ---------- read-only views ----------
    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def entrance(self) -> int:
        return 0

    @property
    def exit(self) -> int:
        return self.grid.cell_count - 1

    @property
    def walls(self) -> Tuple[bool, ...]:
        return tuple(self._walls)

    @property
    def paths(self) -> Tuple[Tuple[int, ...], ...]:
        return tuple(tuple(p) for p in self._paths)

    @property
    def removed_count(self) -> int:
        return sum(self._walls)

    def is_removed(self, wall: int) -> bool:
        return self._walls[self.grid.check_wall(wall)]

    def edges(self) -> Iterator[Edge]:
        """Removed walls as (lo, hi) cell pairs, in path-list order."""
        for lo, his in enumerate(self._paths):
            for hi in his:
                yield lo, hi

    def check_generated(self) -> None:
        if not self.generated:
            raise MazeError(f"{self!r} has no finished maze to render")

    # ---------- generation ----------
    def remove_wall(self, wall: int) -> bool:
        """
        Remove `wall` if it joins two different partitions. Returns True when
        the wall was removed, False when the draw was a no-op (already
        removed, or both sides already connected).
        """
        a, b = self.grid.wall_endpoints(wall)
        if self._walls[wall]:
            return False
        if self.partition.same_group(a, b):
            return False
        self.partition.merge(a, b)
        self._walls[wall] = True
        self._paths[a].append(b)   # endpoints come back lower-first
        log.debug("removed wall %d between cells %d and %d", wall, a, b)
        return True

    def generate(self, rng: Optional[RandomSource] = None) -> "Maze":
        """
        Draw random walls until the whole grid is one partition.

        `rng` is any object with `randbelow(n)`; a private PyRandom is used when
        omitted. Raises AlgorithmInvariantViolated if the draw budget
        (options.max_iterations) runs out; the maze is then
        marked failed and cannot be rendered or regenerated.
        """
        if self.generated or self.failed:
            raise MazeError(f"{self!r} was already generated")
        if rng is None:
            rng = PyRandom()

        n_walls = self.grid.wall_count
        budget = self.options.max_iterations(self.grid.cell_count, n_walls)
        while not self.partition.is_fully_connected():
            if self.iterations >= budget:
                self.failed = True
                log.error(
                    "%dx%d maze still has %d groups after %d draws",
                    self.width, self.height, self.partition.group_count(), self.iterations,
                )
                raise AlgorithmInvariantViolated(
                    f"grid not connected after {self.iterations} draws (budget {budget})"
                )
            self.remove_wall(rng.randbelow(n_walls))
            self.iterations += 1

        self.generated = True
        log.info(
            "generated %dx%d maze: %d walls removed in %d draws",
            self.width, self.height, self.removed_count, self.iterations,
        )
        return self

    # ---------- traversal ----------
    def neighbours(self, cell: int) -> List[int]:
        """Cells reachable from `cell` through one removed wall."""
        g = self.grid
        col, row = g.coords(cell)
        out = []
        if col > 0 and self._walls[g.vertical_wall(col - 1, row)]:
            out.append(cell - 1)
        if col < g.width - 1 and self._walls[g.vertical_wall(col, row)]:
            out.append(cell + 1)
        if row > 0 and self._walls[g.horizontal_wall(col, row - 1)]:
            out.append(cell - g.width)
        if row < g.height - 1 and self._walls[g.horizontal_wall(col, row)]:
            out.append(cell + g.width)
        return out

    def solve(self, start: Optional[int] = None, goal: Optional[int] = None) -> List[int]:
        """
        Breadth-first route from `start` (default entrance) to `goal` (default
        exit) through removed walls. Empty list when the goal is unreachable.
        """
        start = self.entrance if start is None else self.grid.check_cell(start)
        goal = self.exit if goal is None else self.grid.check_cell(goal)
        prev = {start: start}
        q = deque([start])
        while q:
            cur = q.popleft()
            if cur == goal:
                break
            for nxt in self.neighbours(cur):
                if nxt not in prev:
                    prev[nxt] = cur
                    q.append(nxt)
        if goal not in prev:
            return []
        route = [goal]
        while route[-1] != start:
            route.append(prev[route[-1]])
        route.reverse()
        return route
