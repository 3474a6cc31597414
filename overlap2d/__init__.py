"""overlap2d: overlap area, centroid and incidence points of 2D primitives."""

__version__ = "0.1.0"

from .constants import EPS_CHORD, EPS_LINE
from .geometry import (
    Point,
    Clump,
    Location,
    Shape,
    HalfPlane,
    Circle,
    Polygon,
    Line,
    LineSegment,
)
from .intersect import UnsupportedIntersection, intersect, output_type

__all__ = [
    "EPS_CHORD",
    "EPS_LINE",
    "Point",
    "Clump",
    "Location",
    "Shape",
    "HalfPlane",
    "Circle",
    "Polygon",
    "Line",
    "LineSegment",
    "UnsupportedIntersection",
    "intersect",
    "output_type",
]
