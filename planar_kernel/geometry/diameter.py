"""Diameter of a point set via convex hull and rotating calipers."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import numpy as np

from ..errors import InsufficientPointsError, check_point_count
from .closest_pair import PointPair
from .hull import convex_hull
from .predicates import Orientation, edge_turn
from .primitives import EPS, Point, PointLike, Wide, as_points, dist_sq, to_extended

logger = logging.getLogger(__name__)


def _farthest_on_hull(hull: list[Point], eps: float) -> tuple[Wide, Point, Point]:
    """Rotating calipers over a counter-clockwise hull.

    For each edge i -> i+1 the antipodal pointer j moves forward while the
    next edge at j still turns counter-clockwise relative to edge i. j is
    never reset, so the sweep is linear in the hull size.
    """
    n = len(hull)
    if n == 1:
        return 0, hull[0], hull[0]
    if n == 2:
        return dist_sq(hull[0], hull[1]), hull[0], hull[1]

    best: Wide = 0
    pair = (hull[0], hull[1])
    j = 1
    for i in range(n):
        p1 = hull[i]
        p2 = hull[(i + 1) % n]
        while (
            edge_turn(p1, p2, hull[j], hull[(j + 1) % n], eps)
            == Orientation.COUNTERCLOCKWISE
        ):
            j = (j + 1) % n

        for p in (p1, p2):
            d = dist_sq(p, hull[j])
            if d > best:
                best = d
                pair = (p, hull[j])

    return best, pair[0], pair[1]


def polygon_diameter(
    points: Iterable[PointLike],
    eps: float = EPS,
    strict: bool = False,
) -> np.longdouble:
    """Largest distance between any two points of the set.

    The diameter of a point set equals the diameter of its convex hull,
    so the hull is built first and swept with rotating calipers.

    Args:
        points: Input points (not modified)
        eps: Tolerance for the hull and caliper turn tests
        strict: Raise InsufficientPointsError for fewer than 2 points

    Returns:
        The maximum pairwise distance, or 0 for fewer than 2 points.
    """
    pts = as_points(points)
    if not check_point_count(pts, 2, "polygon_diameter", strict):
        return to_extended(0)

    hull = convex_hull(pts, eps)
    best, _, _ = _farthest_on_hull(hull, eps)
    result = np.sqrt(to_extended(best))
    logger.debug(f"Diameter over {len(pts)} points ({len(hull)} on hull): {result}")
    return result


def find_diameter_pair(
    points: Iterable[PointLike],
    eps: float = EPS,
) -> PointPair:
    """Find the two points realising the diameter of the set.

    Raises:
        InsufficientPointsError: If fewer than 2 points are given
    """
    pts = as_points(points)
    if len(pts) < 2:
        raise InsufficientPointsError("find_diameter_pair", 2, len(pts))

    best, first, second = _farthest_on_hull(convex_hull(pts, eps), eps)
    return PointPair(np.sqrt(to_extended(best)), first, second)
