"""Polygon measure and point queries.

A polygon reads its vertices from any ordered, indexable sequence of
point-likes: a tuple or list of :class:`Point`, a list of ``(x, y)`` tuples,
an ``N x 2`` numpy array, or a slice or view of these. The sequence is
treated cyclically; the closing edge back to the first vertex is implicit.
"""

from dataclasses import dataclass
from typing import Iterator, Sequence

from .line import LineSegment
from .shape import Shape
from .types import Clump, Location, Point


def polygon_signed_area(vertices: Sequence) -> float:
    """Calculate the signed area of a polygon.

    Positive = counter-clockwise, negative = clockwise.
    """
    n = len(vertices)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        a = Point.of(vertices[i])
        b = Point.of(vertices[(i + 1) % n])
        area += a.perp_dot(b)

    return area / 2.0


def polygon_clump(vertices: Sequence) -> Clump:
    """Area and centroid by the shoelace formula.

    Works for either winding. Needs at least 3 vertices; with fewer the area
    is 0 and the centroid NaN.
    """
    n = len(vertices)
    signed_area = 0.0
    moment = Point(0.0, 0.0)
    for i in range(n):
        a = Point.of(vertices[i])
        b = Point.of(vertices[(i + 1) % n])
        cross = a.perp_dot(b)
        signed_area += cross
        moment += (a + b) * cross

    signed_area *= 0.5
    return Clump(moment / (6.0 * signed_area), abs(signed_area))


def point_in_polygon(point: Point, vertices: Sequence) -> bool:
    """Check if a point is inside a polygon using ray casting."""
    n = len(vertices)
    if n < 3:
        return False

    inside = False

    j = n - 1
    for i in range(n):
        xi, yi = Point.of(vertices[i])
        xj, yj = Point.of(vertices[j])

        if ((yi > point.y) != (yj > point.y)) and \
           (point.x < (xj - xi) * (point.y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside


@dataclass(frozen=True, eq=False)
class Polygon(Shape):
    """Simple polygon over a read-only vertex sequence."""
    vertices: Sequence

    def __len__(self) -> int:
        return len(self.vertices)

    def points(self) -> Iterator[Point]:
        for vertex in self.vertices:
            yield Point.of(vertex)

    def edges(self) -> Iterator[LineSegment]:
        """Edges in order, including the closing one."""
        n = len(self.vertices)
        for i in range(n):
            yield LineSegment(
                Point.of(self.vertices[i]),
                Point.of(self.vertices[(i + 1) % n]),
            )

    def signed_area(self) -> float:
        return polygon_signed_area(self.vertices)

    def clump(self) -> Clump:
        return polygon_clump(self.vertices)

    def locate(self, point: Point) -> Location:
        if any(edge.contains(point) for edge in self.edges()):
            return Location.BORDER
        if point_in_polygon(point, self.vertices):
            return Location.INSIDE
        return Location.OUTSIDE
