# src/mazegen/render/surface.py
# pygame rendering: draw a finished maze onto any Surface, plus a tiny
# viewer window (S toggles the route, Esc or close quits).

from __future__ import annotations

from typing import Optional

import pygame

from ..config import RENDER_DEFAULTS, RenderOptions
from ..generator import Maze
from .layout import Box, Layout


def _rect(box: Box) -> pygame.Rect:
    x0, y0, x1, y1 = box
    return pygame.Rect(x0, y0, x1 - x0 + 1, y1 - y0 + 1)


def draw_maze(
    surface: pygame.Surface,
    maze: Maze,
    options: Optional[RenderOptions] = None,
    show_route: bool = False,
) -> None:
    """Paint the maze at the surface's top-left corner. Does not flip the display."""
    maze.check_generated()
    opts = options or RENDER_DEFAULTS
    lay = Layout(maze, opts)
    surface.fill(opts.background, pygame.Rect((0, 0), lay.size))

    surface.fill(opts.entrance_color, _rect(lay.cell_box(maze.entrance)))
    if maze.exit != maze.entrance:
        surface.fill(opts.exit_color, _rect(lay.cell_box(maze.exit)))
    for box in lay.wall_boxes():
        surface.fill(opts.wall_color, _rect(box))

    if show_route:
        pts = lay.route_points(maze.solve())
        if len(pts) > 1:
            pygame.draw.lines(surface, opts.route_color, False, pts, lay.route_width)


def run_viewer(maze: Maze, options: Optional[RenderOptions] = None, fps: int = 60) -> None:
    opts = options or RENDER_DEFAULTS
    pygame.init()
    try:
        screen = pygame.display.set_mode(Layout(maze, opts).size)
        pygame.display.set_caption(f"maze {maze.width}x{maze.height}")
        clock = pygame.time.Clock()
        show_route = False
        dirty = True
        running = True
        while running:
            for e in pygame.event.get():
                if e.type == pygame.QUIT:
                    running = False
                elif e.type == pygame.KEYDOWN:
                    if e.key == pygame.K_ESCAPE:
                        running = False
                    elif e.key == pygame.K_s:
                        show_route = not show_route
                        dirty = True
            if dirty:
                draw_maze(screen, maze, opts, show_route=show_route)
                pygame.display.flip()
                dirty = False
            clock.tick(fps)
    finally:
        pygame.quit()
