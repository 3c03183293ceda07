"""Orientation and segment predicates.

``_classify_cross`` is the only place a cross product is turned into a turn
direction; every hull, intersection and caliper step goes through it so
that ties are broken the same way everywhere.
"""

from __future__ import annotations

from enum import IntEnum

from .primitives import EPS, Point, PointLike, Wide, as_point, widen


class Orientation(IntEnum):
    """Turn direction of an ordered triple of points."""

    COLLINEAR = 0
    CLOCKWISE = 1
    COUNTERCLOCKWISE = 2


def _cross(ax: Wide, ay: Wide, bx: Wide, by: Wide) -> Wide:
    return ax * by - ay * bx


def _classify_cross(value: Wide, eps: float) -> Orientation:
    if abs(value) < eps:
        return Orientation.COLLINEAR
    return Orientation.COUNTERCLOCKWISE if value > 0 else Orientation.CLOCKWISE


def orientation(
    p: PointLike, q: PointLike, r: PointLike, eps: float = EPS
) -> Orientation:
    """Classify the turn p -> q -> r.

    Uses the sign of (q - p) x (r - q) evaluated in extended precision.
    Values within ``eps`` of zero are COLLINEAR.
    """
    p, q, r = as_point(p), as_point(q), as_point(r)
    value = _cross(
        widen(q.x) - widen(p.x),
        widen(q.y) - widen(p.y),
        widen(r.x) - widen(q.x),
        widen(r.y) - widen(q.y),
    )
    return _classify_cross(value, eps)


def edge_turn(
    a1: Point, a2: Point, b1: Point, b2: Point, eps: float = EPS
) -> Orientation:
    """Classify the turn from direction a1 -> a2 to direction b1 -> b2.

    COUNTERCLOCKWISE means (a2 - a1) x (b2 - b1) > eps.
    """
    value = _cross(
        widen(a2.x) - widen(a1.x),
        widen(a2.y) - widen(a1.y),
        widen(b2.x) - widen(b1.x),
        widen(b2.y) - widen(b1.y),
    )
    return _classify_cross(value, eps)


def on_segment(p: PointLike, q: PointLike, r: PointLike) -> bool:
    """Check whether q lies within the bounding box of segment pr.

    Only containment is checked; the caller must already know that
    p, q and r are collinear.
    """
    p, q, r = as_point(p), as_point(q), as_point(r)
    return (
        min(p.x, r.x) <= q.x <= max(p.x, r.x)
        and min(p.y, r.y) <= q.y <= max(p.y, r.y)
    )


def do_intersect(
    p1: PointLike,
    q1: PointLike,
    p2: PointLike,
    q2: PointLike,
    eps: float = EPS,
) -> bool:
    """Check whether closed segments p1q1 and p2q2 intersect.

    Touching endpoints and overlapping collinear segments count as
    intersecting.
    """
    p1, q1, p2, q2 = as_point(p1), as_point(q1), as_point(p2), as_point(q2)

    o1 = orientation(p1, q1, p2, eps)
    o2 = orientation(p1, q1, q2, eps)
    o3 = orientation(p2, q2, p1, eps)
    o4 = orientation(p2, q2, q1, eps)

    collinear = Orientation.COLLINEAR
    if collinear not in (o1, o2, o3, o4) and o1 != o2 and o3 != o4:
        return True

    # Degenerate cases: an endpoint lies on the other segment's line
    if o1 == collinear and on_segment(p1, p2, q1):
        return True
    if o2 == collinear and on_segment(p1, q2, q1):
        return True
    if o3 == collinear and on_segment(p2, p1, q2):
        return True
    if o4 == collinear and on_segment(p2, q1, q2):
        return True

    return False
