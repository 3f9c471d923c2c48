# src/mazegen/cli.py
# Command line entry point:  mazegen <width> <height> [options]
#
# Exit status: 0 ok, 1 usage, 2 width/height not a number,
#              3 non-positive size, 4 generation failed, 5 output not writable.

import argparse
import logging
import os
import re
import sys
from typing import List, Optional

from .config import DEFAULT_DOT_PATH, GeneratorOptions, RenderOptions
from .errors import AlgorithmInvariantViolated, InvalidDimensions
from .generator import Maze
from .render.ascii import print_maze
from .render.dot import write_dot
from .rng import PMRandom, PyRandom

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_NOT_NUMBER = 2
EXIT_BAD_SIZE = 3
EXIT_FAILED = 4
EXIT_WRITE = 5

log = logging.getLogger(__name__)

# Plain decimal with an optional sign; no underscores or padding.
INT_RE = re.compile(r"[+-]?[0-9]+")


class UsageError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    # argparse exits with status 2 on bad usage; we reserve 2 for "not a number".
    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    p = _Parser(prog="mazegen", description="Generate a perfect maze and print it.")
    p.add_argument("width", help="maze width in cells (>= 1)")
    p.add_argument("height", help="maze height in cells (>= 1)")
    p.add_argument("--dot", default=DEFAULT_DOT_PATH, help=f"graphviz output path (default {DEFAULT_DOT_PATH})")
    p.add_argument("--no-dot", action="store_true", help="skip the dot file")
    p.add_argument("--png", help="also render a PNG image to this path")
    p.add_argument("--cell-size", type=int, default=16, help="PNG/viewer cell size in pixels")
    p.add_argument("--json", help="also dump the maze as JSON to this path")
    p.add_argument("--seed", type=int, help="use the reproducible Park–Miller generator with this seed")
    p.add_argument("--solve", action="store_true", help="draw the entrance→exit route in PNG output")
    p.add_argument("--show", action="store_true", help="open a pygame window with the maze")
    p.add_argument("--iteration-factor", type=int, default=10, help="draw budget multiplier")
    p.add_argument("-v", "--verbose", action="count", default=0)
    return p


def _parse_int(name: str, text: str) -> int:
    if not INT_RE.fullmatch(text):
        raise ValueError(f"{name} is not number ({text})")
    return int(text)


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")


def run(argv: Optional[List[str]] = None, configure_logging: bool = False) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as exc:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    if configure_logging:
        _setup_logging(args.verbose)

    try:
        w = _parse_int("width", args.width)
        h = _parse_int("height", args.height)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return EXIT_NOT_NUMBER

    try:
        gen_opts = GeneratorOptions(iteration_factor=args.iteration_factor)
        render_opts = None
        if args.png or args.show:
            render_opts = RenderOptions(cell_size=args.cell_size)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return EXIT_USAGE

    try:
        maze = Maze(w, h, gen_opts)
    except InvalidDimensions as exc:
        print(exc, file=sys.stderr)
        return EXIT_BAD_SIZE

    rng = PMRandom(args.seed) if args.seed is not None else PyRandom()
    log.debug("random source %r", rng)
    try:
        maze.generate(rng)
    except AlgorithmInvariantViolated as exc:
        print(f"maze generation failed: {exc}", file=sys.stderr)
        return EXIT_FAILED

    print_maze(maze, sys.stdout)

    try:
        if not args.no_dot:
            write_dot(maze, args.dot)
        if args.json:
            from .export import write_json
            write_json(maze, args.json)
        if args.png:
            from .render.image import save_image
            save_image(maze, args.png, render_opts, show_route=args.solve)
    except OSError as exc:
        print(f"cannot write output: {exc}", file=sys.stderr)
        return EXIT_WRITE
    if args.show:
        os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
        from .render.surface import run_viewer
        run_viewer(maze, render_opts)
    return EXIT_OK


def main() -> None:
    sys.exit(run(configure_logging=True))


if __name__ == "__main__":
    main()
