"""Shared fixtures and helpers for unit tests."""

import numpy as np
import pytest

from graham_hull.geometry import Point, left, signed_area


def pts(*pairs):
    """Shorthand: pts((0, 0), (1, 1)) -> [Point(0, 0), Point(1, 1)]."""
    return [Point(x, y) for x, y in pairs]


def is_strictly_convex_ccw(hull):
    """Every consecutive triple, wrapping around, makes a strict left turn."""
    n = len(hull)
    if n < 3:
        return True
    return all(left(hull[i], hull[(i + 1) % n], hull[(i + 2) % n]) for i in range(n))


def contains(hull, p):
    """True if p lies inside or on the boundary of a counterclockwise hull."""
    n = len(hull)
    if n == 0:
        return False
    if n == 1:
        return p == hull[0]
    if n == 2:
        a, b = hull
        return (
            signed_area(a, b, p) == 0
            and min(a.x, b.x) <= p.x <= max(a.x, b.x)
            and min(a.y, b.y) <= p.y <= max(a.y, b.y)
        )
    return all(signed_area(hull[i], hull[(i + 1) % n], p) >= 0 for i in range(n))


@pytest.fixture
def square_with_interior():
    return pts((0, 0), (4, 0), (4, 4), (0, 4), (2, 2))


@pytest.fixture
def random_cloud():
    """Factory for reproducible integer point clouds."""
    def make(n, bound=50, seed=0):
        rng = np.random.default_rng(seed)
        coords = rng.integers(-bound, bound, size=(n, 2), endpoint=True)
        return [Point(int(x), int(y)) for x, y in coords]
    return make
