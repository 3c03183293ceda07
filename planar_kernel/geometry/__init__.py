"""Planar geometry primitives, predicates and algorithms."""

from .closest_pair import PointPair, closest_pair, find_closest_pair
from .diameter import find_diameter_pair, polygon_diameter
from .hull import convex_hull
from .polygon import is_inside, polygon_area
from .predicates import Orientation, do_intersect, edge_turn, on_segment, orientation
from .primitives import (
    EPS,
    Point,
    PointLike,
    as_point,
    as_points,
    dist_sq,
    distance,
    to_extended,
)

__all__ = [
    # Primitives
    "EPS",
    "Point",
    "PointLike",
    "as_point",
    "as_points",
    "dist_sq",
    "distance",
    "to_extended",
    # Predicates
    "Orientation",
    "orientation",
    "edge_turn",
    "on_segment",
    "do_intersect",
    # Algorithms
    "convex_hull",
    "is_inside",
    "polygon_area",
    "closest_pair",
    "find_closest_pair",
    "polygon_diameter",
    "find_diameter_pair",
    "PointPair",
]
