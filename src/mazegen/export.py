# src/mazegen/export.py
# JSON snapshot of a finished maze (labels, wall flags, path list).

import json
import logging
from typing import Any, Dict, Optional

from .generator import Maze

log = logging.getLogger(__name__)


def to_dict(maze: Maze) -> Dict[str, Any]:
    """
    Keys:
      width, height  grid dimensions
      areas          partition label per cell (all 0 once generated)
      walls          per wall index: 0 = present, 1 = removed
      paths          per cell: the higher cells it is joined to
    """
    maze.check_generated()
    return {
        "width": maze.width,
        "height": maze.height,
        "areas": list(maze.partition.labels),
        "walls": [int(w) for w in maze.walls],
        "paths": [list(p) for p in maze.paths],
    }


def write_json(maze: Maze, path: str, indent: Optional[int] = None) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(to_dict(maze), f, indent=indent)
        f.write("\n")
    log.info("wrote %s", path)
