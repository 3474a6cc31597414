"""Common interface of the area-bearing primitives."""

from abc import ABC, abstractmethod

from ..intersect import Intersectable
from .types import Clump, Location, Point


class Shape(Intersectable, ABC):
    """A primitive with an area and a centroid.

    Subclasses provide :meth:`clump` and :meth:`locate`; everything else is
    derived from those two. ``area`` and ``centroid`` are read-only
    properties, as on shapely geometries, not methods.
    """

    @abstractmethod
    def clump(self) -> Clump:
        """Area and centroid of the whole shape."""

    @abstractmethod
    def locate(self, point: Point) -> Location:
        """Where ``point`` lies relative to the shape."""

    @property
    def area(self) -> float:
        return self.clump().area

    @property
    def centroid(self) -> Point:
        return self.clump().centroid

    def is_inside(self, point: Point) -> bool:
        """True if ``point`` is inside the shape or on its border."""
        return self.locate(point) is not Location.OUTSIDE
