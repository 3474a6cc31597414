"""Type definitions for overlap2d geometry."""

import math
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Point:
    """2D point, also used as a 2D vector."""
    x: float
    y: float

    @classmethod
    def of(cls, value) -> "Point":
        """Coerce a Point or any (x, y) pair (tuple, list, numpy row)."""
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(float(x), float(y))

    def __iter__(self):
        yield self.x
        yield self.y

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __mul__(self, k: float) -> "Point":
        return Point(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> "Point":
        # Zero divisor gives NaN instead of raising, like float vector math.
        if k == 0:
            return Point(math.nan, math.nan)
        return Point(self.x / k, self.y / k)

    def dot(self, other: "Point") -> float:
        return self.x * other.x + self.y * other.y

    def perp(self) -> "Point":
        """Counter-clockwise perpendicular."""
        return Point(-self.y, self.x)

    def perp_dot(self, other: "Point") -> float:
        """2D cross product, ``self.x * other.y - self.y * other.x``."""
        return self.x * other.y - self.y * other.x

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> "Point":
        return self / self.length()

    def abs(self) -> "Point":
        return Point(abs(self.x), abs(self.y))

    def max_element(self) -> float:
        return max(self.x, self.y)

    def lerp(self, other: "Point", t: float) -> "Point":
        return self + (other - self) * t


@dataclass(frozen=True)
class Clump:
    """Area and centroid of a shape or of an overlap region.

    Only the first-order measure is kept, not the boundary. ``centroid`` is
    meaningful only when ``area > 0``.
    """
    centroid: Point
    area: float

    @classmethod
    def unbounded(cls) -> "Clump":
        """Sentinel for regions without a finite measure."""
        return cls(Point(math.inf, math.inf), math.inf)

    def __add__(self, other: "Clump") -> "Clump":
        """Merge two disjoint clumps."""
        area = self.area + other.area
        centroid = (self.centroid * self.area + other.centroid * other.area) / area
        return Clump(centroid, area)


class Location(Enum):
    """Where a point lies relative to a shape."""
    INSIDE = "inside"
    BORDER = "border"
    OUTSIDE = "outside"

    @classmethod
    def from_distance(cls, distance: float) -> "Location":
        """Negative signed distance is inside, positive is outside."""
        if distance < 0:
            return cls.INSIDE
        if distance > 0:
            return cls.OUTSIDE
        return cls.BORDER
