"""Conversions between kernel points, NumPy arrays and Shapely geometries."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
from shapely.geometry import LineString, MultiPoint, Polygon
from shapely.geometry import Point as ShapelyPoint

from .geometry.hull import convex_hull
from .geometry.primitives import Point, PointLike, as_points

# Type aliases
Coords = list[tuple[float, float]]


def points_from_array(array: np.ndarray) -> list[Point]:
    """Create points from an (N, 2) array.

    Integer arrays produce integer coordinates, so the kernel keeps its
    exact arithmetic for them.
    """
    arr = np.asarray(array)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected an (N, 2) array, got shape {arr.shape}")
    return [Point(x, y) for x, y in arr.tolist()]


def points_to_array(points: Iterable[PointLike]) -> np.ndarray:
    """Stack points into an (N, 2) array."""
    pts = as_points(points)
    if not pts:
        return np.empty((0, 2))
    return np.array([p.as_tuple() for p in pts])


def polygon_from_shapely(polygon: Polygon) -> list[Point]:
    """Extract the exterior ring of a Shapely Polygon as kernel points.

    The closing coordinate Shapely repeats is dropped; holes are ignored.
    """
    if polygon.is_empty:
        return []
    return [Point(x, y) for x, y in polygon.exterior.coords[:-1]]


def polygon_to_shapely(points: Iterable[PointLike]) -> Polygon:
    """Create a Shapely Polygon from an implicitly closed vertex list."""
    return Polygon([p.as_tuple() for p in as_points(points)])


def points_to_multipoint(points: Iterable[PointLike]) -> MultiPoint:
    """Create a Shapely MultiPoint from a point cloud."""
    return MultiPoint([p.as_tuple() for p in as_points(points)])


def hull_to_shapely(points: Iterable[PointLike]) -> Polygon | LineString | ShapelyPoint:
    """Convex hull of a point cloud as a Shapely geometry.

    Returns a Polygon for three or more hull vertices, a LineString for
    two and a Point for one; an empty Polygon for no points.
    """
    hull = convex_hull(points)
    coords: Coords = [p.as_tuple() for p in hull]
    if len(coords) >= 3:
        return Polygon(coords)
    if len(coords) == 2:
        return LineString(coords)
    if len(coords) == 1:
        return ShapelyPoint(coords[0])
    return Polygon()
