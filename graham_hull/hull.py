"""Convex hull construction with the Graham scan.

The builder picks the lowest point as pivot, sorts the remaining points
counterclockwise around it with an exact comparator and sweeps them with a
stack, discarding every vertex that fails to make a strict left turn.
"""

import logging
from functools import cmp_to_key
from typing import Callable, Iterable, List

from graham_hull.config import config
from graham_hull.geometry import (
    Point,
    collinear,
    left,
    signed_area,
    squared_distance,
)

logger = logging.getLogger(__name__)

# Default for max_coordinate: take the bound from config
CONFIG_BOUND = object()


class HullError(Exception):
    """Base exception for hull construction errors."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidInputError(HullError):
    """Raised when the point set is missing or malformed."""
    pass


class AllocationFailureError(HullError):
    """Raised when memory for the working set or stack cannot be obtained."""
    pass


def select_pivot(points: List[Point]) -> int:
    """Return the index of the pivot: lowest y, ties broken by lowest x.

    The first point encountered wins among exact duplicates. Breaking ties
    on x keeps every other lowest point on a single ray (angle 0) from the
    pivot, which the angular comparator relies on.
    """
    pivot_index = 0
    for i in range(1, len(points)):
        p = points[i]
        best = points[pivot_index]
        if (p.y, p.x) < (best.y, best.x):
            pivot_index = i
    return pivot_index


def angular_comparator(pivot: Point) -> Callable[[Point, Point], int]:
    """Build a cmp-style comparator ordering points counterclockwise around pivot.

    Points on the same ray from the pivot are ordered far-to-near, so the
    sweep meets the farthest one first and the nearer ones are popped.
    """
    def compare(p1: Point, p2: Point) -> int:
        if collinear(p1, pivot, p2):
            d1 = squared_distance(pivot, p1)
            d2 = squared_distance(pivot, p2)
            if d1 == d2:
                return 0
            return -1 if d1 > d2 else 1

        # p2 right of p1->pivot means p1 has the smaller polar angle
        return -1 if signed_area(p1, pivot, p2) < 0 else 1

    return compare


class HullBuilder:
    """Computes convex hulls of 2D point sets.

    Each call to build() works on its own copy of the input; the builder
    itself holds only the coordinate bound and can be shared freely.

    max_coordinate defaults to config.MAX_COORDINATE. Pass None explicitly
    for an unbounded build regardless of HULL_MAX_COORDINATE.
    """

    def __init__(self, max_coordinate=CONFIG_BOUND):
        if max_coordinate is CONFIG_BOUND:
            max_coordinate = config.MAX_COORDINATE
        self.max_coordinate = max_coordinate

    def build(self, points: Iterable) -> List[Point]:
        """Return the convex hull of points.

        Args:
            points: Iterable of Points, (x, y) pairs, {"x", "y"} dicts or an
                    (n, 2) numpy array.

        Returns:
            Hull vertices in counterclockwise order starting at the pivot.
            With three or fewer points the input is returned in input order.
            The polygon is not closed; the last vertex connects to the first.

        Raises:
            InvalidInputError: points is None or holds an invalid point
            AllocationFailureError: memory ran out while building
        """
        working = self._prepare(points)
        n = len(working)
        if n <= 3:
            logger.debug(f"{n} points, every point is on the hull")
            return working

        try:
            pivot_index = select_pivot(working)
            working[0], working[pivot_index] = working[pivot_index], working[0]
            pivot = working[0]
            logger.debug(f"Pivot {pivot} selected from {n} points")

            ordered = sorted(working[1:], key=cmp_to_key(angular_comparator(pivot)))
            hull = self._sweep(pivot, ordered)
        except MemoryError as e:
            raise AllocationFailureError(f"Out of memory building hull of {n} points") from e

        logger.debug(f"Hull has {len(hull)} vertices")
        return hull

    def _prepare(self, points) -> List[Point]:
        if points is None:
            raise InvalidInputError("Point set must not be None")
        if isinstance(points, (str, bytes)):
            raise InvalidInputError("Point set must be a sequence of points, not a string")

        try:
            iterator = iter(points)
        except TypeError:
            raise InvalidInputError(f"Point set must be iterable, got {type(points).__name__}")

        working = []
        try:
            for i, value in enumerate(iterator):
                try:
                    point = Point.of(value)
                except (TypeError, ValueError) as e:
                    raise InvalidInputError(f"Invalid point at index {i}: {e}") from e
                self._check_bound(i, point)
                working.append(point)
        except MemoryError as e:
            raise AllocationFailureError("Out of memory copying the point set") from e
        return working

    def _check_bound(self, index: int, point: Point) -> None:
        if self.max_coordinate is None:
            return
        if abs(point.x) > self.max_coordinate or abs(point.y) > self.max_coordinate:
            raise InvalidInputError(
                f"Point {point} at index {index} exceeds coordinate bound {self.max_coordinate}"
            )

    @staticmethod
    def _sweep(pivot: Point, ordered: List[Point]) -> List[Point]:
        stack = [pivot, ordered[0], ordered[1]]

        for p in ordered[2:]:
            # Pop every vertex that does not make a strict left turn towards p
            while len(stack) > 2 and not left(stack[-2], stack[-1], p):
                stack.pop()
            stack.append(p)

        # Close the polygon: drop vertices collinear with the edge back to the
        # pivot, including copies of the pivot itself (they sort last).
        while len(stack) >= 3 and not left(stack[-2], stack[-1], pivot):
            stack.pop()
        if len(stack) == 2 and stack[1] == pivot:
            stack.pop()

        return stack


def convex_hull(points: Iterable, max_coordinate=CONFIG_BOUND) -> List[Point]:
    """Compute the convex hull of points. See HullBuilder.build."""
    return HullBuilder(max_coordinate=max_coordinate).build(points)
