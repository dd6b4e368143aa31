"""Geometry primitives for hull computation.

Pure math functions: the orientation predicate and the helpers built on it.
All predicates use exact arithmetic, so integer input is never rounded.
"""

import math
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Iterator, Sequence, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Point:
    """An immutable 2D point. Equal coordinates mean equal points."""

    x: Number
    y: Number

    def __iter__(self) -> Iterator[Number]:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y})"

    @classmethod
    def of(cls, value) -> "Point":
        """Build a Point from a Point, an (x, y) pair or a length-2 array.

        numpy scalars are converted to plain Python numbers so products
        are computed with arbitrary precision instead of a fixed width.

        Raises:
            TypeError: value is not a pair of real numbers
            ValueError: a coordinate is NaN or infinite
        """
        if isinstance(value, Point):
            return value
        if isinstance(value, dict):
            value = (value.get("x"), value.get("y"))
        try:
            x, y = value
        except (TypeError, ValueError):
            raise TypeError(f"Expected an (x, y) pair, got {value!r}")
        return cls(_coordinate(x), _coordinate(y))


def _coordinate(value) -> Number:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"Coordinate must be a real number, got {value!r}")
    if isinstance(value, Integral):
        return int(value)
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"Coordinate must be finite, got {value!r}")
    return value


def signed_area(a: Point, b: Point, c: Point) -> Number:
    """Return twice the signed area of triangle abc.

    Positive if c is strictly left of the directed line a->b
    (counterclockwise turn), negative if strictly right, zero if the
    three points are collinear.
    """
    return (b.x - a.x) * (c.y - a.y) - (c.x - a.x) * (b.y - a.y)


def collinear(p: Point, q: Point, r: Point) -> bool:
    return signed_area(p, q, r) == 0


def left(a: Point, b: Point, c: Point) -> bool:
    """True if c is strictly left of a->b. Collinear is not left."""
    return signed_area(a, b, c) > 0


def squared_distance(p: Point, q: Point) -> Number:
    return (p.x - q.x) * (p.x - q.x) + (p.y - q.y) * (p.y - q.y)


def polar_angle(origin: Point, p: Point) -> float:
    """Angle of p around origin in radians. For display only."""
    return math.atan2(p.y - origin.y, p.x - origin.x)


def polygon_area2(points: Sequence[Point]) -> Number:
    """Twice the signed shoelace area; positive for counterclockwise order."""
    n = len(points)
    if n < 3:
        return 0
    total = 0
    for i in range(n):
        a = points[i]
        b = points[(i + 1) % n]
        total += a.x * b.y - b.x * a.y
    return total
