"""Half-plane primitive."""

from dataclasses import dataclass

from .shape import Shape
from .types import Clump, Location, Point


@dataclass(frozen=True)
class HalfPlane(Shape):
    """Occupied side of an infinite edge.

    Attributes:
        normal: Unit normal of the edge, pointing from occupied to free space.
            Not validated; a non-unit normal scales every distance.
        offset: Signed distance from the origin to the edge. Positive when the
            origin is inside, negative when it is outside.
    """
    normal: Point
    offset: float

    def __post_init__(self):
        object.__setattr__(self, "normal", Point.of(self.normal))

    @classmethod
    def from_normal(cls, point: Point, normal: Point) -> "HalfPlane":
        """Half-plane whose edge passes through ``point``."""
        point, normal = Point.of(point), Point.of(normal)
        return cls(normal, point.dot(normal))

    @classmethod
    def from_edge(cls, a: Point, b: Point) -> "HalfPlane":
        """Construct from two points lying on the edge.

        Walking from ``a`` to ``b``, the left side is free and the right side
        is occupied.
        """
        a, b = Point.of(a), Point.of(b)
        return cls.from_normal(a, (b - a).perp().normalize())

    def distance(self, point: Point) -> float:
        """Signed distance to the edge, negative inside."""
        return point.dot(self.normal) - self.offset

    def locate(self, point: Point) -> Location:
        return Location.from_distance(self.distance(point))

    def clump(self) -> Clump:
        return Clump.unbounded()
