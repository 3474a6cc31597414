"""Conversions between overlap2d primitives and shapely geometries.

shapely works with finite, piecewise-linear geometry, so circles become
buffered points and half-planes must be clipped to a bounding box first.
These conversions are approximations meant for cross-checking and
visualisation, not for feeding results back into the engine.
"""

from typing import Tuple

import numpy as np
from shapely import geometry as sg

from .geometry import Circle, HalfPlane, LineSegment, Point, Polygon

Bounds = Tuple[float, float, float, float]


def to_shapely(obj, quad_segs: int = 64):
    """Convert a primitive to the equivalent shapely geometry.

    Args:
        obj: A Point, Circle, Polygon or LineSegment.
        quad_segs: Segments per quarter circle when approximating circles.

    Raises:
        TypeError: ``obj`` has no finite shapely counterpart (use
            :func:`half_plane_to_shapely` for half-planes).
    """
    if isinstance(obj, Point):
        return sg.Point(obj.x, obj.y)
    if isinstance(obj, Circle):
        return sg.Point(obj.center.x, obj.center.y).buffer(obj.radius, quad_segs=quad_segs)
    if isinstance(obj, Polygon):
        return sg.Polygon([tuple(p) for p in obj.points()])
    if isinstance(obj, LineSegment):
        return sg.LineString([tuple(obj.p0), tuple(obj.p1)])
    raise TypeError(f"cannot convert {type(obj).__name__} to a shapely geometry")


def half_plane_to_shapely(plane: HalfPlane, bounds: Bounds) -> sg.Polygon:
    """Occupied side of ``plane`` clipped to ``(minx, miny, maxx, maxy)``."""
    minx, miny, maxx, maxy = bounds
    clip = sg.box(minx, miny, maxx, maxy)

    # Long enough to cover the box from the edge point closest to the origin
    reach = 2.0 * (
        abs(plane.offset)
        + np.hypot(max(abs(minx), abs(maxx)), max(abs(miny), abs(maxy)))
    ) + 1.0
    origin = plane.normal * plane.offset
    along = plane.normal.perp() * reach
    inward = -plane.normal * reach
    corners = [
        origin + along,
        origin - along,
        origin - along + inward,
        origin + along + inward,
    ]
    occupied = sg.Polygon([tuple(c) for c in corners])
    return occupied.intersection(clip)


def polygon_from_shapely(geom) -> Polygon:
    """Polygon backed by a numpy array of the exterior ring.

    The closing vertex shapely repeats at the end of a ring is dropped.
    """
    if not isinstance(geom, sg.Polygon):
        raise TypeError(f"expected a shapely Polygon, got {type(geom).__name__}")
    coords = np.asarray(geom.exterior.coords, dtype=float)
    return Polygon(coords[:-1])


def point_from_shapely(geom) -> Point:
    if not isinstance(geom, sg.Point):
        raise TypeError(f"expected a shapely Point, got {type(geom).__name__}")
    return Point(geom.x, geom.y)
