# src/mazegen/config.py
import math
from dataclasses import dataclass
from typing import Tuple

RGB = Tuple[int, int, int]

DEFAULT_DOT_PATH = "maze.dot"


@dataclass(frozen=True)
class GeneratorOptions:
    # Every wall of a spanning path may need drawing, so the budget scales
    # with the coupon-collector bound wall_count * ln(wall_count).
    iteration_factor: int = 10

    def __post_init__(self):
        if self.iteration_factor < 1:
            raise ValueError("iteration_factor must be >= 1")

    def max_iterations(self, cell_count: int, wall_count: int) -> int:
        per_wall = max(1, math.ceil(math.log(wall_count))) if wall_count > 1 else 1
        return self.iteration_factor * max(cell_count, wall_count * per_wall)


@dataclass(frozen=True)
class RenderOptions:
    cell_size: int = 16
    wall_width: int = 2
    margin: int = 8
    background: RGB = (255, 255, 255)
    wall_color: RGB = (0, 0, 0)
    entrance_color: RGB = (135, 206, 235)  # skyblue, same as the dot export
    exit_color: RGB = (0, 128, 0)          # green
    route_color: RGB = (220, 60, 60)

    def __post_init__(self):
        if self.cell_size < 4:
            raise ValueError("cell_size must be >= 4")
        if not (1 <= self.wall_width < self.cell_size):
            raise ValueError("wall_width must be in 1..cell_size-1")
        if self.margin < 0:
            raise ValueError("margin must be >= 0")


# Module defaults (callers may pass their own instances)
GENERATOR_DEFAULTS = GeneratorOptions()
RENDER_DEFAULTS = RenderOptions()
