"""Closest pair of points by divide and conquer.

Distances are carried as squared values in the wide type for the whole
recursion; a single square root is taken at the end.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from ..errors import InsufficientPointsError, check_point_count
from .primitives import Point, PointLike, Wide, as_points, dist_sq, to_extended, widen

logger = logging.getLogger(__name__)

DEFAULT_BRUTE_FORCE_CUTOFF = 3


@dataclass(frozen=True)
class PointPair:
    """Two input points and the distance between them."""

    distance: np.longdouble
    first: Point
    second: Point

    def as_tuple(self) -> tuple[Point, Point]:
        return (self.first, self.second)


# Working entries are (point, rank in x order)
_Entry = tuple[Point, int]


@dataclass
class _Best:
    d: Wide
    pair: tuple[Point, Point] | None = None

    def offer(self, a: Point, b: Point) -> None:
        d = dist_sq(a, b)
        if d < self.d:
            self.d = d
            self.pair = (a, b)


def _brute_force(by_x: list[_Entry], best: _Best) -> None:
    for i in range(len(by_x)):
        for j in range(i + 1, len(by_x)):
            best.offer(by_x[i][0], by_x[j][0])


def _strip_closest(strip: list[Point], best: _Best) -> None:
    """Scan a y-ordered strip, stopping each inner scan once dy^2 >= best."""
    for i, p in enumerate(strip):
        py = widen(p.y)
        for k in range(i + 1, len(strip)):
            q = strip[k]
            dy = widen(q.y) - py
            if dy * dy >= best.d:
                break
            best.offer(p, q)


def _closest_util(
    by_x: list[_Entry], by_y: list[_Entry], best: _Best, cutoff: int
) -> None:
    n = len(by_x)
    if n <= cutoff:
        _brute_force(by_x, best)
        return

    mid = n // 2
    mid_point, mid_rank = by_x[mid]

    # Stable split of the y-ordered list by x-rank keeps both halves y-sorted
    left_y = [e for e in by_y if e[1] < mid_rank]
    right_y = [e for e in by_y if e[1] >= mid_rank]

    _closest_util(by_x[:mid], left_y, best, cutoff)
    _closest_util(by_x[mid:], right_y, best, cutoff)

    mid_x = widen(mid_point.x)
    strip = []
    for p, _ in by_y:
        dx = widen(p.x) - mid_x
        if dx * dx < best.d:
            strip.append(p)

    _strip_closest(strip, best)


def _search(pts: list[Point], cutoff: int) -> _Best:
    by_x = sorted(pts)
    entries = [(p, rank) for rank, p in enumerate(by_x)]
    by_y = sorted(entries, key=lambda e: e[0].y)

    best = _Best(d=math.inf)
    _closest_util(entries, by_y, best, max(cutoff, 2))
    return best


def closest_pair(
    points: Iterable[PointLike],
    strict: bool = False,
    cutoff: int = DEFAULT_BRUTE_FORCE_CUTOFF,
) -> np.longdouble:
    """Smallest distance between any two points of the set.

    Args:
        points: Input points (not modified)
        strict: Raise InsufficientPointsError for fewer than 2 points
        cutoff: Range size at or below which the recursion brute-forces

    Returns:
        The minimum pairwise distance, or 0 for fewer than 2 points.
    """
    pts = as_points(points)
    if not check_point_count(pts, 2, "closest_pair", strict):
        return to_extended(0)

    best = _search(pts, cutoff)
    result = np.sqrt(to_extended(best.d))
    logger.debug(f"Closest pair over {len(pts)} points: {result}")
    return result


def find_closest_pair(
    points: Iterable[PointLike],
    cutoff: int = DEFAULT_BRUTE_FORCE_CUTOFF,
) -> PointPair:
    """Find the two closest points of the set.

    Raises:
        InsufficientPointsError: If fewer than 2 points are given
    """
    pts = as_points(points)
    if len(pts) < 2:
        raise InsufficientPointsError("find_closest_pair", 2, len(pts))

    best = _search(pts, cutoff)
    first, second = best.pair
    return PointPair(np.sqrt(to_extended(best.d)), first, second)
