"""Tests for points, clumps and locations."""

import math

import numpy as np
import pytest

from overlap2d import Clump, Location, Point


def test_point_arithmetic():
    a = Point(1.0, 2.0)
    b = Point(3.0, -1.0)
    assert a + b == Point(4.0, 1.0)
    assert a - b == Point(-2.0, 3.0)
    assert -a == Point(-1.0, -2.0)
    assert a * 2.0 == Point(2.0, 4.0)
    assert 2.0 * a == Point(2.0, 4.0)
    assert b / 2.0 == Point(1.5, -0.5)


def test_point_products():
    """Dot, cross and perpendicular follow the right-hand convention."""
    a = Point(1.0, 0.0)
    b = Point(0.0, 1.0)
    assert a.dot(b) == 0.0
    assert a.perp_dot(b) == 1.0
    assert b.perp_dot(a) == -1.0
    assert a.perp() == b
    assert Point(3.0, 4.0).length() == 5.0
    assert Point(3.0, 4.0).length_squared() == 25.0


def test_point_helpers():
    assert Point(-3.0, 2.0).abs() == Point(3.0, 2.0)
    assert Point(-3.0, 2.0).abs().max_element() == 3.0
    assert Point(0.0, 0.0).lerp(Point(4.0, 2.0), 0.25) == Point(1.0, 0.5)
    assert tuple(Point(3.0, 4.0).normalize()) == pytest.approx((0.6, 0.8))
    assert tuple(Point(1.0, 2.0)) == (1.0, 2.0)


def test_division_by_zero_gives_nan():
    """Unchecked inputs propagate NaN instead of raising."""
    result = Point(1.0, 2.0) / 0.0
    assert math.isnan(result.x)
    assert math.isnan(result.y)
    assert math.isnan(Point(0.0, 0.0).normalize().x)


def test_point_of():
    """Point-likes are coerced to floats."""
    p = Point(1.0, 2.0)
    assert Point.of(p) is p
    assert Point.of((1, 2)) == p
    assert Point.of([1.0, 2.0]) == p
    assert Point.of(np.array([1.0, 2.0])) == p
    assert isinstance(Point.of(np.array([1.0, 2.0])).x, float)


def test_clump_merge():
    """Merging disjoint clumps weights centroids by area."""
    left = Clump(Point(0.0, 0.0), 1.0)
    right = Clump(Point(3.0, 0.0), 2.0)
    merged = left + right
    assert merged.area == 3.0
    assert merged.centroid == Point(2.0, 0.0)


def test_unbounded_clump():
    clump = Clump.unbounded()
    assert clump.area == math.inf
    assert clump.centroid == Point(math.inf, math.inf)


def test_location_from_distance():
    assert Location.from_distance(-0.5) is Location.INSIDE
    assert Location.from_distance(0.0) is Location.BORDER
    assert Location.from_distance(2.0) is Location.OUTSIDE
