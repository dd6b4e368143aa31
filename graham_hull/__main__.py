"""
Entry point for the hull command line.
"""

import argparse
import logging
import sys
from typing import List, Optional

from graham_hull.config import config
from graham_hull.geometry import polygon_area2
from graham_hull.hull import HullBuilder, HullError, select_pivot
from graham_hull.point_io import OUTPUT_FORMATS, describe_angles, format_hull, load_points, random_points

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graham-hull",
        description="Compute the convex hull of a set of 2D points"
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="File with one 'x y' point per line, or a .json array (default: stdin)"
    )
    parser.add_argument(
        "--random",
        type=int,
        metavar="N",
        help="Generate N random integer points instead of reading input"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for --random"
    )
    parser.add_argument(
        "--max-coordinate",
        type=int,
        default=config.MAX_COORDINATE,
        help="Reject points beyond this magnitude; also the range for --random"
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=config.OUTPUT_FORMAT,
        help="Output format (default: %(default)s)"
    )
    parser.add_argument(
        "--debug-angles",
        action="store_true",
        help="Print each input point with its angle around the pivot to stderr"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=config.LOG_LEVEL.upper(),
        help="Logging level (default: %(default)s)"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=args.log_level, format=config.LOG_FORMAT)

    try:
        if args.random is not None:
            span = 1000 if args.max_coordinate is None else args.max_coordinate
            points = random_points(args.random, span, seed=args.seed)
            logger.info(f"Generated {len(points)} random points")
        else:
            points = load_points(args.input)

        hull = HullBuilder(max_coordinate=args.max_coordinate).build(points)
    except HullError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return 2

    if args.debug_angles and points:
        pivot = points[select_pivot(points)]
        for line in describe_angles(points, pivot):
            print(line, file=sys.stderr)

    logger.info(
        f"Hull of {len(points)} points has {len(hull)} vertices, "
        f"area {polygon_area2(hull) / 2}"
    )
    print(format_hull(hull, args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
