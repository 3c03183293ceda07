"""Shared fixtures for planar-kernel tests."""

import itertools
import math

import numpy as np
import pytest

from planar_kernel import Point


@pytest.fixture
def square():
    """10 x 10 axis-aligned square, counter-clockwise."""
    return [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]


@pytest.fixture
def l_shape():
    """Concave L-shaped hexagon with area 3."""
    return [(0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2)]


@pytest.fixture
def rng():
    """Seeded generator so random clouds are reproducible."""
    return np.random.default_rng(20240917)


@pytest.fixture
def sample_cloud():
    """Six-point cloud whose closest pair is (2, 3)-(3, 4)."""
    return [(2, 3), (12, 30), (40, 50), (5, 1), (12, 10), (3, 4)]


def brute_force_closest(points):
    """O(n^2) reference closest-pair distance."""
    return min(
        math.dist(a, b) for a, b in itertools.combinations(points, 2)
    )


def brute_force_farthest(points):
    """O(n^2) reference farthest-pair distance."""
    return max(
        math.dist(a, b) for a, b in itertools.combinations(points, 2)
    )


def random_convex_polygon(rng, n, radius=100.0):
    """Points on a circle at random angles; every one is a hull vertex."""
    angles = np.sort(rng.uniform(0, 2 * math.pi, size=n))
    return [
        (radius * math.cos(a) + 500.0, radius * math.sin(a) - 250.0)
        for a in angles
    ]
