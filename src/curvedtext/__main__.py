"""Command-line interface."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from curvedtext.logging_config import setup_logging
from curvedtext.model.geometry_primitives import Point, Side
from curvedtext.model.geometry_utils import generate_arc_path, get_arc_direction
from curvedtext.model.layout import DEFAULT_CURVED_TIME_CONFIG, layout_ring_time_text
from curvedtext.utils import format_time

logger = logging.getLogger("curvedtext")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="curvedtext",
        description="Lay out curved time labels around a circular progress ring"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    path = subparsers.add_parser("path", help="Print the arc path descriptor for one arc")
    path.add_argument("--radius", type=float, required=True, help="Arc radius")
    path.add_argument("--start", type=float, required=True, help="Start angle in degrees")
    path.add_argument("--end", type=float, required=True, help="End angle in degrees")
    path.add_argument("--cx", type=float, default=0.0, help="Center x (default: 0)")
    path.add_argument("--cy", type=float, default=0.0, help="Center y (default: 0)")
    direction = path.add_mutually_exclusive_group(required=True)
    direction.add_argument(
        "--side",
        choices=[side.value for side in Side],
        help="Ring side; left runs counter-clockwise, right clockwise"
    )
    direction.add_argument("--clockwise", action="store_true", help="Draw the arc clockwise")
    direction.add_argument("--counter-clockwise", action="store_true", help="Draw the arc counter-clockwise")

    ring = subparsers.add_parser("ring", help="Print elapsed/remaining label layouts as JSON")
    ring.add_argument("--radius", type=float, required=True, help="Ring radius")
    ring.add_argument("--elapsed", type=float, required=True, help="Elapsed time in seconds")
    ring.add_argument("--remaining", type=float, help="Remaining time in seconds")
    ring.add_argument("--font-size", type=float, help="Requested label font size")
    ring.add_argument("--elapsed-label", help="Prefix for the elapsed time")
    ring.add_argument("--remaining-label", help="Prefix for the remaining time")
    ring.add_argument("--container-size", type=float, help="Diameter of the parent canvas")

    return parser


def _run_path(args: argparse.Namespace) -> None:
    if args.side:
        clockwise = get_arc_direction(args.side)
    else:
        clockwise = args.clockwise
    descriptor = generate_arc_path(Point(args.cx, args.cy), args.radius, args.start, args.end, clockwise)
    print(descriptor)


def _run_ring(args: argparse.Namespace) -> None:
    config = DEFAULT_CURVED_TIME_CONFIG.merged(
        elapsed_label=args.elapsed_label,
        remaining_label=args.remaining_label,
        font_size=args.font_size,
    )
    remaining = format_time(args.remaining) if args.remaining is not None else None
    layouts = layout_ring_time_text(
        elapsed_time=format_time(args.elapsed),
        ring_radius=args.radius,
        remaining_time=remaining,
        config=config,
        container_size=args.container_size,
    )
    print(json.dumps({str(side): layout.to_dict() for side, layout in layouts.items()}, indent=2))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if args.command == "path":
            _run_path(args)
        else:
            _run_ring(args)
    except (ValueError, OverflowError) as e:
        logger.error(f"Layout failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
