"""Polygon well-formedness checks.

The kernel never rejects malformed polygons on its own; these checks let
callers tell a degenerate-but-defined input from a meaningless one before
handing it to ``polygon_area`` or ``is_inside``.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import structlog

from .geometry.polygon import polygon_area
from .geometry.predicates import do_intersect
from .geometry.primitives import EPS, PointLike, as_points

logger = structlog.get_logger(__name__)


class PolygonStatus(Enum):
    """Outcome of a polygon check."""
    VALID = "valid"
    EMPTY = "empty"
    TOO_FEW_VERTICES = "too_few_vertices"
    DEGENERATE = "degenerate"
    SELF_INTERSECTING = "self_intersecting"


@dataclass
class PolygonCheck:
    """Result of a polygon check."""

    status: PolygonStatus
    vertex_count: int
    message: Optional[str] = None
    edges: Optional[tuple[int, int]] = None  # First offending edge pair, if any

    @property
    def is_valid(self) -> bool:
        """Check if the polygon is usable as a simple polygon."""
        return self.status == PolygonStatus.VALID


def _first_crossing(verts, eps: float) -> Optional[tuple[int, int]]:
    """Find the first pair of non-adjacent edges that intersect."""
    n = len(verts)
    for i in range(n):
        a1, a2 = verts[i], verts[(i + 1) % n]
        for j in range(i + 2, n):
            if i == 0 and j == n - 1:
                continue  # Edges 0 and n-1 share vertex 0
            b1, b2 = verts[j], verts[(j + 1) % n]
            if do_intersect(a1, a2, b1, b2, eps):
                return i, j
    return None


def check_polygon(
    polygon: Sequence[PointLike],
    eps: float = EPS,
    check_simple: bool = True,
) -> PolygonCheck:
    """Check that a vertex list describes a usable simple polygon.

    Args:
        polygon: Polygon vertices, implicitly closed
        eps: Tolerance for the zero-area and intersection tests
        check_simple: Run the O(n^2) self-intersection scan

    Returns:
        PolygonCheck with status and the offending edges, if any
    """
    verts = as_points(polygon)
    n = len(verts)

    if n == 0:
        result = PolygonCheck(PolygonStatus.EMPTY, 0, "Polygon has no vertices")
    elif n < 3:
        result = PolygonCheck(
            PolygonStatus.TOO_FEW_VERTICES,
            n,
            f"Polygon must have at least 3 vertices, got {n}",
        )
    elif polygon_area(verts) < eps:
        result = PolygonCheck(
            PolygonStatus.DEGENERATE, n, "Polygon has zero area"
        )
    else:
        crossing = _first_crossing(verts, eps) if check_simple else None
        if crossing is not None:
            result = PolygonCheck(
                PolygonStatus.SELF_INTERSECTING,
                n,
                f"Edges {crossing[0]} and {crossing[1]} intersect",
                edges=crossing,
            )
        else:
            result = PolygonCheck(PolygonStatus.VALID, n)

    logger.debug("polygon_checked", status=result.status.value, vertices=n)
    return result
