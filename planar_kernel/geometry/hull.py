"""Convex hull by Andrew's monotone chain."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..errors import check_point_count
from .predicates import Orientation, orientation
from .primitives import EPS, Point, PointLike, as_points

logger = logging.getLogger(__name__)


def convex_hull(
    points: Iterable[PointLike],
    eps: float = EPS,
    strict: bool = False,
) -> list[Point]:
    """Compute the convex hull of a point set.

    Args:
        points: Input points (not modified)
        eps: Collinearity tolerance for the turn test
        strict: Raise InsufficientPointsError on empty input

    Returns:
        Hull vertices in counter-clockwise order starting from the
        lexicographically smallest point, without a repeated closing
        vertex. Collinear boundary points are dropped. Inputs of two
        points or fewer are returned as a new list, order unchanged.
    """
    pts = as_points(points)
    check_point_count(pts, 1, "convex_hull", strict)

    n = len(pts)
    if n <= 2:
        logger.debug(f"Hull of {n} point(s) returned unchanged")
        return pts

    pts.sort()
    hull: list[Point] = []

    # Lower chain, left to right
    for p in pts:
        while (
            len(hull) >= 2
            and orientation(hull[-2], hull[-1], p, eps)
            != Orientation.COUNTERCLOCKWISE
        ):
            hull.pop()
        hull.append(p)

    # Upper chain, right to left; never pop into the lower chain
    lower_size = len(hull) + 1
    for p in reversed(pts[:-1]):
        while (
            len(hull) >= lower_size
            and orientation(hull[-2], hull[-1], p, eps)
            != Orientation.COUNTERCLOCKWISE
        ):
            hull.pop()
        hull.append(p)

    # Last point is the first point again
    hull.pop()

    logger.debug(f"Convex hull: {n} points -> {len(hull)} vertices")
    return hull
