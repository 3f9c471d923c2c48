# src/mazegen/render/image.py
# Render a finished maze to a Pillow image (PNG on disk).

import logging
import os
from typing import Optional

from PIL import Image, ImageDraw

from ..config import RENDER_DEFAULTS, RenderOptions
from ..generator import Maze
from .layout import Layout

log = logging.getLogger(__name__)


def render_image(
    maze: Maze,
    options: Optional[RenderOptions] = None,
    show_route: bool = False,
) -> Image.Image:
    """
    Draw walls as solid bars, fill the entrance and exit cells, and optionally
    trace the entrance→exit route through cell centres.
    """
    maze.check_generated()
    opts = options or RENDER_DEFAULTS
    lay = Layout(maze, opts)
    img = Image.new("RGB", lay.size, opts.background)
    draw = ImageDraw.Draw(img)

    draw.rectangle(lay.cell_box(maze.entrance), fill=opts.entrance_color)
    if maze.exit != maze.entrance:
        draw.rectangle(lay.cell_box(maze.exit), fill=opts.exit_color)
    for box in lay.wall_boxes():
        draw.rectangle(box, fill=opts.wall_color)

    if show_route:
        pts = lay.route_points(maze.solve())
        if len(pts) > 1:
            draw.line(pts, fill=opts.route_color, width=lay.route_width, joint="curve")
    return img


def save_image(
    maze: Maze,
    path: str,
    options: Optional[RenderOptions] = None,
    show_route: bool = False,
) -> None:
    img = render_image(maze, options, show_route=show_route)
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    img.save(path)
    log.info("wrote %s (%dx%d px)", path, img.width, img.height)
