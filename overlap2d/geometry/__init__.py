"""Geometry primitives for overlap2d."""

from .types import Point, Clump, Location
from .shape import Shape
from .half_plane import HalfPlane
from .circle import Circle, CircleSegment, circle_segment
from .polygon import (
    Polygon,
    polygon_clump,
    polygon_signed_area,
    point_in_polygon,
)
from .line import Line, LineSegment

__all__ = [
    "Point",
    "Clump",
    "Location",
    "Shape",
    "HalfPlane",
    "Circle",
    "CircleSegment",
    "circle_segment",
    "Polygon",
    "polygon_clump",
    "polygon_signed_area",
    "point_in_polygon",
    "Line",
    "LineSegment",
]
