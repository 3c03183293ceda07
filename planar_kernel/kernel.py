"""Config-bound facade over the kernel's free functions."""

from collections.abc import Iterable, Sequence

import numpy as np

from .geometry import (
    Orientation,
    Point,
    PointLike,
    PointPair,
    closest_pair,
    convex_hull,
    do_intersect,
    find_closest_pair,
    find_diameter_pair,
    is_inside,
    on_segment,
    orientation,
    polygon_area,
    polygon_diameter,
)
from .models.config import KernelConfig
from .profiles.loader import load_profile
from .validation import PolygonCheck, check_polygon


class GeometryKernel:
    """Runs every kernel operation with one tolerance and strictness setting.

    Holds no state besides its immutable config; instances can be shared
    freely.

    Example:
        kernel = GeometryKernel.from_profile("strict")
        kernel.polygon_area([(0, 0), (10, 0), (10, 10), (0, 10)])
    """

    def __init__(self, config: KernelConfig | None = None):
        self.config = config or KernelConfig()

    @classmethod
    def from_profile(cls, name: str = "default", override: dict | None = None) -> "GeometryKernel":
        return cls(load_profile(name, override))

    def __repr__(self) -> str:
        return f"GeometryKernel(eps={self.config.eps}, strict={self.config.strict})"

    # Predicates

    def orientation(self, p: PointLike, q: PointLike, r: PointLike) -> Orientation:
        return orientation(p, q, r, self.config.eps)

    def on_segment(self, p: PointLike, q: PointLike, r: PointLike) -> bool:
        return on_segment(p, q, r)

    def do_intersect(
        self, p1: PointLike, q1: PointLike, p2: PointLike, q2: PointLike
    ) -> bool:
        return do_intersect(p1, q1, p2, q2, self.config.eps)

    # Algorithms

    def convex_hull(self, points: Iterable[PointLike]) -> list[Point]:
        return convex_hull(points, self.config.eps, self.config.strict)

    def is_inside(self, polygon: Sequence[PointLike], p: PointLike) -> bool:
        return is_inside(polygon, p, self.config.eps, self.config.strict)

    def polygon_area(self, polygon: Sequence[PointLike]) -> np.longdouble:
        return polygon_area(polygon, self.config.strict)

    def closest_pair(self, points: Iterable[PointLike]) -> np.longdouble:
        return closest_pair(points, self.config.strict, self.config.brute_force_cutoff)

    def find_closest_pair(self, points: Iterable[PointLike]) -> PointPair:
        return find_closest_pair(points, self.config.brute_force_cutoff)

    def polygon_diameter(self, points: Iterable[PointLike]) -> np.longdouble:
        return polygon_diameter(points, self.config.eps, self.config.strict)

    def find_diameter_pair(self, points: Iterable[PointLike]) -> PointPair:
        return find_diameter_pair(points, self.config.eps)

    # Validation

    def check_polygon(self, polygon: Sequence[PointLike]) -> PolygonCheck:
        return check_polygon(polygon, self.config.eps)
