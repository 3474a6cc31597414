"""Tests for half-planes."""

import math

import pytest

from overlap2d import Clump, HalfPlane, Location, Point


def test_from_normal_passes_through_point():
    """The defining point lies on the edge."""
    plane = HalfPlane.from_normal(Point(2.0, 3.0), Point(0.0, 1.0))
    assert plane.offset == 3.0
    assert plane.distance(Point(2.0, 3.0)) == 0.0
    assert plane.distance(Point(-7.0, 3.0)) == 0.0
    assert plane.distance(Point(0.0, 1.0)) == -2.0
    assert plane.distance(Point(0.0, 4.5)) == 1.5


def test_offset_sign_follows_origin():
    """Offset is positive when the origin is occupied."""
    up = Point(0.0, 1.0)
    assert HalfPlane.from_normal(Point(0.0, 1.0), up).offset > 0
    assert HalfPlane.from_normal(Point(0.0, -1.0), up).offset < 0


def test_from_edge_right_side_occupied():
    """Walking from a to b, the right side is inside."""
    plane = HalfPlane.from_edge(Point(0.0, 1.0), Point(1.0, 1.0))
    assert tuple(plane.normal) == pytest.approx((0.0, 1.0))
    assert plane.locate(Point(0.5, 0.0)) is Location.INSIDE
    assert plane.locate(Point(0.5, 2.0)) is Location.OUTSIDE
    assert plane.locate(Point(5.0, 1.0)) is Location.BORDER


def test_from_edge_diagonal():
    """Diagonal edges get a unit normal."""
    plane = HalfPlane.from_edge(Point(0.0, 0.0), Point(1.0, 1.0))
    assert plane.normal.length() == pytest.approx(1.0)
    assert plane.distance(Point(1.0, 0.0)) == pytest.approx(-math.sqrt(0.5))
    assert plane.is_inside(Point(1.0, 0.0))
    assert not plane.is_inside(Point(0.0, 1.0))


def test_clump_is_unbounded():
    """A half-plane has no finite measure."""
    plane = HalfPlane(Point(1.0, 0.0), 0.0)
    assert plane.clump() == Clump.unbounded()
    assert plane.area == math.inf
    assert plane.centroid == Point(math.inf, math.inf)


def test_zero_length_edge_does_not_raise():
    """Coincident edge points yield a NaN normal."""
    plane = HalfPlane.from_edge(Point(1.0, 1.0), Point(1.0, 1.0))
    assert math.isnan(plane.normal.x)


def test_half_plane_from_tuples():
    """Normals and edge points given as plain pairs are coerced."""
    plane = HalfPlane((0.0, 1.0), 3.0)
    assert plane.normal == Point(0.0, 1.0)
    assert plane.distance(Point(0.0, 1.0)) == -2.0

    assert HalfPlane.from_normal((2.0, 3.0), (0.0, 1.0)) == HalfPlane(Point(0.0, 1.0), 3.0)
    edge = HalfPlane.from_edge((0.0, 0.0), (1.0, 1.0))
    assert edge == HalfPlane.from_edge(Point(0.0, 0.0), Point(1.0, 1.0))
