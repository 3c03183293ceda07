"""Point value type and metric primitives.

Coordinates may be any real number type. All arithmetic that feeds a
predicate or a reported measurement is done in a wider type than the
coordinates themselves:

- integral coordinates stay Python ``int`` (exact, unbounded)
- everything else is promoted to ``numpy.longdouble``
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Union

import numpy as np

EPS = 1e-9

Wide = Union[int, np.longdouble]


def widen(value: Real) -> Wide:
    """Promote a coordinate to the extended accumulator type."""
    if isinstance(value, Integral):
        return int(value)
    return np.longdouble(value)


def to_extended(value: Real) -> np.longdouble:
    """Convert a wide intermediate result to the reported floating type."""
    return np.longdouble(value)


@dataclass(frozen=True, eq=False)
class Point:
    """A planar point.

    Equality is exact for integral coordinates and tolerant (``EPS``)
    otherwise. Ordering is lexicographic on ``(x, y)`` and exact.
    """

    x: Real
    y: Real

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        if _is_integral(self) and _is_integral(other):
            return self.x == other.x and self.y == other.y
        return self.isclose(other)

    def __lt__(self, other: Point) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        if self.x != other.x:
            return self.x < other.x
        return self.y < other.y

    def __le__(self, other: Point) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return not other < self

    def __iter__(self) -> Iterator[Real]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def isclose(self, other: Point, eps: float = EPS) -> bool:
        """Tolerant comparison with a caller-chosen epsilon."""
        return (
            abs(widen(self.x) - widen(other.x)) < eps
            and abs(widen(self.y) - widen(other.y)) < eps
        )

    def as_tuple(self) -> tuple[Real, Real]:
        return (self.x, self.y)


PointLike = Union[Point, Sequence[Real]]


def _is_integral(p: Point) -> bool:
    return isinstance(p.x, Integral) and isinstance(p.y, Integral)


def as_point(obj: PointLike) -> Point:
    """Coerce a ``Point`` or an ``(x, y)`` pair to a ``Point``."""
    if isinstance(obj, Point):
        return obj
    x, y = obj
    return Point(x, y)


def as_points(objs: Iterable[PointLike]) -> list[Point]:
    """Coerce an iterable of point-likes to a new list of ``Point``."""
    return [as_point(o) for o in objs]


def dist_sq(p1: Point, p2: Point) -> Wide:
    """Squared Euclidean distance in the wide type."""
    dx = widen(p1.x) - widen(p2.x)
    dy = widen(p1.y) - widen(p2.y)
    return dx * dx + dy * dy


def distance(p1: PointLike, p2: PointLike) -> np.longdouble:
    """Euclidean distance as ``numpy.longdouble``."""
    return np.sqrt(to_extended(dist_sq(as_point(p1), as_point(p2))))
