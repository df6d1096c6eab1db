"""
Application entry point — CLI parsing, logging setup, terminal launch.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="metaterm",
        description="Metaballs bouncing around your terminal.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "examples:\n"
            "  %(prog)s                          # 3 balls, radius 3–10, 24 fps\n"
            "  %(prog)s --balls 5 --fill '#'      # more balls, different glyph\n"
            "  %(prog)s --radius 2 4 --speed -1 1  # small, slow balls\n"
            "  %(prog)s --seed 42 -v --log-file metaterm.log\n"
            "\nPress Ctrl-C to stop.\n"
        ),
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--balls", type=int, default=3, help="Number of balls (default 3)")
    p.add_argument("--radius", type=float, nargs=2, default=(3.0, 10.0), metavar=("MIN", "MAX"),
                   help="Ball radius range in cells (default 3 10)")
    p.add_argument("--speed", type=float, nargs=2, default=(-2.0, 2.0), metavar=("MIN", "MAX"),
                   help="Per-axis velocity range in cells/frame (default -2 2)")
    p.add_argument("--fill", type=str, default="A", help="Fill glyph (default 'A')")
    p.add_argument("--fps", type=int, default=24, help="Target frame rate (default 24)")
    p.add_argument("--seed", type=int, default=None, help="RNG seed for reproducible runs")
    p.add_argument("--log-file", type=str, default=None, help="Write log records to this file")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p.parse_args(argv)


def _setup_logging(verbose: bool, log_file: Optional[str]) -> None:
    # The terminal is the canvas: stay quiet on stderr unless asked
    if log_file:
        level = logging.DEBUG if verbose else logging.INFO
    else:
        level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        filename=log_file,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    _setup_logging(args.verbose, args.log_file)
    logger = logging.getLogger("metaterm")

    import numpy as np
    from .engine import MapConfig
    from .loop import AnimationLoop
    from .terminal import AnsiTerminal, TerminalUnavailableError, get_terminal_size

    try:
        width, height = get_terminal_size(sys.stdout)
    except TerminalUnavailableError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)
    print(f"Your terminal is {width} cols wide and {height} lines tall")

    try:
        config = MapConfig(
            width=width,
            height=height,
            fill_char=args.fill,
            ball_count=args.balls,
            radius_range=tuple(args.radius),
            speed_range=tuple(args.speed),
            fps=args.fps,
        )
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)

    logger.info("Starting metaterm v%s", __version__)
    logger.info("Balls: %d, radius: %s, speed: %s, seed: %s",
                config.ball_count, config.radius_range, config.speed_range, args.seed)

    loop = AnimationLoop(config, AnsiTerminal(sys.stdout), rng=np.random.default_rng(args.seed))
    try:
        loop.run()
    except KeyboardInterrupt:
        sys.exit(130)
