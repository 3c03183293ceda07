"""Point-in-polygon and polygon area for simple polygons."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from ..errors import check_point_count
from .predicates import Orientation, do_intersect, on_segment, orientation
from .primitives import EPS, Point, PointLike, as_point, as_points, to_extended, widen

logger = logging.getLogger(__name__)


def is_inside(
    polygon: Sequence[PointLike],
    p: PointLike,
    eps: float = EPS,
    strict: bool = False,
) -> bool:
    """Check whether a point lies inside or on the boundary of a polygon.

    Casts a horizontal ray to the right of ``p`` and counts the polygon
    edges it crosses; odd means inside. An edge is counted only when its
    endpoints lie on opposite sides of the ray's line (half-open rule), so
    a ray through a vertex is counted once. Crossings follow this rule, not
    the raw segment-intersection hits, and a collinear edge counts only when
    it contains ``p``.

    Args:
        polygon: Simple polygon vertices, either winding, implicitly closed
        p: Query point
        eps: Collinearity tolerance
        strict: Raise InsufficientPointsError for fewer than 3 vertices

    Returns:
        True if ``p`` is inside or on an edge, False otherwise (including
        polygons with fewer than 3 vertices in lenient mode).
    """
    verts = as_points(polygon)
    if not check_point_count(verts, 3, "is_inside", strict):
        logger.debug(f"Polygon with {len(verts)} vertices contains nothing")
        return False

    p = as_point(p)
    # Far end of the ray lies past every vertex
    extreme = Point(max(max(v.x for v in verts), p.x) + 1, p.y)

    n = len(verts)
    crossings = 0
    for i in range(n):
        a = verts[i]
        b = verts[(i + 1) % n]
        if not do_intersect(a, b, p, extreme, eps):
            continue
        if orientation(a, p, b, eps) == Orientation.COLLINEAR:
            if on_segment(a, p, b):
                return True
            # Edge runs along the ray without containing p
            continue
        if (a.y > p.y) != (b.y > p.y):
            crossings += 1

    return crossings % 2 == 1


def polygon_area(
    polygon: Sequence[PointLike],
    strict: bool = False,
) -> np.longdouble:
    """Area of a simple polygon via the shoelace formula.

    Works for either winding order. Returns 0 for fewer than 3 vertices
    unless ``strict`` is set, in which case InsufficientPointsError is
    raised.
    """
    verts = as_points(polygon)
    if not check_point_count(verts, 3, "polygon_area", strict):
        logger.debug(f"Area of {len(verts)}-vertex polygon taken as 0")
        return to_extended(0)

    n = len(verts)
    total = 0
    for i in range(n):
        j = (i + 1) % n
        total += widen(verts[i].x) * widen(verts[j].y)
        total -= widen(verts[j].x) * widen(verts[i].y)

    return to_extended(abs(total)) / 2
