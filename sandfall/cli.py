"""Command-line entry point.

Usage:
    python -m sandfall scan.txt [--source X,Y] [--max-grains N]
                                [--no-path-cache] [--render] [--image PATH] [-v]

Prints the abyss-policy count and the floor-policy count, one per line.
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from sandfall.config import DEFAULT_CONFIG, SimulationConfig
from sandfall.errors import SandfallError
from sandfall.levels.parse import parse_polylines, parse_vertex
from sandfall.renderer.image import render_image
from sandfall.simulate import run_both
from sandfall.utils.render import render_state

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sandfall", description="Simulate sand settling through a rock scan"
    )
    parser.add_argument("scan", type=Path, help="Rock scan in 'x,y -> x,y' notation")
    parser.add_argument(
        "--source",
        default=None,
        help="Sand source as X,Y (default: %d,%d)"
        % (DEFAULT_CONFIG.source.x, DEFAULT_CONFIG.source.y),
    )
    parser.add_argument(
        "--max-grains",
        type=int,
        default=DEFAULT_CONFIG.max_grains or 0,
        help="Abort a run that drops more grains than this (0 disables it)",
    )
    parser.add_argument(
        "--no-path-cache",
        action="store_true",
        help="Start every floor-policy grain at the source",
    )
    parser.add_argument(
        "--render", action="store_true", help="Print both final maps as text"
    )
    parser.add_argument(
        "--image", type=Path, default=None, help="Save the floor-policy map as PNG"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    config = replace(
        DEFAULT_CONFIG,
        max_grains=args.max_grains if args.max_grains > 0 else None,
        reuse_fall_path=not args.no_path_cache,
    )
    if args.source is not None:
        config = replace(config, source=parse_vertex(args.source))
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = config_from_args(args)
        polylines = parse_polylines(args.scan.read_text())
        report = run_both(polylines, config)
    except (SandfallError, OSError) as exc:
        print(f"sandfall: {exc}", file=sys.stderr)
        return 1

    print(report.abyss)
    print(report.floor)

    if args.render:
        print()
        print(render_state(report.abyss_state))
        print()
        print(render_state(report.floor_state))
    if args.image is not None:
        render_image(report.floor_state).save(args.image)
        logger.info("Wrote %s", args.image)
    return 0
