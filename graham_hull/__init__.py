"""Convex hulls of 2D point sets with the Graham scan."""

from graham_hull.geometry import (
    Point,
    collinear,
    left,
    polygon_area2,
    signed_area,
    squared_distance,
)
from graham_hull.hull import (
    AllocationFailureError,
    HullBuilder,
    HullError,
    InvalidInputError,
    angular_comparator,
    convex_hull,
    select_pivot,
)

__all__ = [
    "AllocationFailureError",
    "HullBuilder",
    "HullError",
    "InvalidInputError",
    "Point",
    "angular_comparator",
    "collinear",
    "convex_hull",
    "left",
    "polygon_area2",
    "select_pivot",
    "signed_area",
    "squared_distance",
]
