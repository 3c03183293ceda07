"""planar-kernel - Robust 2D computational-geometry primitives.

This package provides:
- Point type with exact integer / tolerant float comparison
- Orientation and segment-intersection predicates
- Convex hull (monotone chain) and point-in-polygon tests
- Polygon area, closest pair and diameter (rotating calipers)
- NumPy and Shapely interop

Functions can be used directly:
    from planar_kernel import convex_hull, closest_pair

Or through a facade bound to a tolerance profile:
    from planar_kernel import GeometryKernel
    kernel = GeometryKernel.from_profile("strict")
"""

__version__ = "0.1.0"

from .errors import GeometryError, InsufficientPointsError
from .geometry import (
    EPS,
    Orientation,
    Point,
    PointPair,
    as_point,
    as_points,
    closest_pair,
    convex_hull,
    dist_sq,
    distance,
    do_intersect,
    edge_turn,
    find_closest_pair,
    find_diameter_pair,
    is_inside,
    on_segment,
    orientation,
    polygon_area,
    polygon_diameter,
)
from .kernel import GeometryKernel
from .models import KernelConfig
from .validation import PolygonCheck, PolygonStatus, check_polygon

__all__ = [
    "__version__",
    # Data model
    "EPS",
    "Point",
    "PointPair",
    "as_point",
    "as_points",
    "dist_sq",
    "distance",
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
    # Configuration and errors
    "GeometryKernel",
    "KernelConfig",
    "GeometryError",
    "InsufficientPointsError",
    "PolygonCheck",
    "PolygonStatus",
    "check_polygon",
]
