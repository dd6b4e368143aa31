"""Point acquisition and hull formatting for the command line.

Parsing, file loading, random generation and the debug angle table.
"""

import json
import logging
import sys
from typing import List, Optional, Sequence

import numpy as np

from graham_hull.geometry import Point, polar_angle
from graham_hull.hull import InvalidInputError

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "json")


def _parse_number(token: str):
    try:
        return int(token)
    except ValueError:
        return float(token)


def parse_points(text: str) -> List[Point]:
    """Parse one point per line, "x y" or "x,y".

    Blank lines and anything after '#' are ignored. Integers stay ints,
    anything else is read as a float.

    Raises:
        InvalidInputError: a line does not hold exactly two numbers
    """
    points = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        tokens = line.replace(",", " ").split()
        if len(tokens) != 2:
            raise InvalidInputError(f"Line {lineno}: expected 2 coordinates, got {len(tokens)}")
        try:
            points.append(Point.of([_parse_number(t) for t in tokens]))
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"Line {lineno}: {e}") from e
    return points


def parse_json_points(text: str) -> List[Point]:
    """Parse a JSON array of [x, y] pairs or {"x": .., "y": ..} objects."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidInputError(f"Invalid JSON: {e}") from e
    if not isinstance(data, list):
        raise InvalidInputError("JSON input must be an array of points")

    points = []
    for i, value in enumerate(data):
        try:
            points.append(Point.of(value))
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"Invalid point at index {i}: {e}") from e
    return points


def load_points(path: str) -> List[Point]:
    """Read points from a file, or from stdin when path is '-'.

    Files ending in .json (or stdin starting with '[') are read as JSON.
    """
    if path == "-":
        try:
            text = sys.stdin.read()
        except UnicodeDecodeError as e:
            raise InvalidInputError(f"Cannot read stdin: {e}") from e
        is_json = text.lstrip().startswith("[")
    else:
        try:
            with open(path, encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise InvalidInputError(f"Cannot read {path}: {e}") from e
        is_json = path.endswith(".json")

    points = parse_json_points(text) if is_json else parse_points(text)
    logger.info(f"Loaded {len(points)} points from {'stdin' if path == '-' else path}")
    return points


def random_points(n: int, max_coordinate: int = 1000, seed: Optional[int] = None) -> List[Point]:
    """Generate n integer points uniformly in [-max_coordinate, max_coordinate]^2."""
    if n < 0:
        raise InvalidInputError(f"Number of points must be >= 0, got {n}")
    rng = np.random.default_rng(seed)
    coords = rng.integers(-max_coordinate, max_coordinate, size=(n, 2), endpoint=True)
    return [Point.of(row) for row in coords]


def format_hull(hull: Sequence[Point], fmt: str = "text") -> str:
    """Render hull vertices as text lines ("x y") or a JSON array of pairs."""
    if fmt == "json":
        return json.dumps([[p.x, p.y] for p in hull])
    if fmt == "text":
        return "\n".join(f"{p.x} {p.y}" for p in hull)
    raise ValueError(f"Unknown output format: {fmt}")


def describe_angles(points: Sequence[Point], pivot: Point) -> List[str]:
    """One line per point with its angle around pivot, for debugging the sort."""
    return [f"({p.x}, {p.y}) angle: {polar_angle(pivot, p):f}" for p in points]
