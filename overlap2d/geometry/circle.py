"""Circle primitive and its overlap with half-planes and other circles."""

import logging
import math
from dataclasses import dataclass
from typing import Optional

from ..constants import EPS_CHORD
from ..intersect import register
from .half_plane import HalfPlane
from .shape import Shape
from .types import Clump, Location, Point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Circle(Shape):
    """Circle given by center and radius (radius >= 0, not validated)."""
    center: Point
    radius: float

    def __post_init__(self):
        object.__setattr__(self, "center", Point.of(self.center))

    def clump(self) -> Clump:
        return Clump(self.center, math.pi * self.radius ** 2)

    def locate(self, point: Point) -> Location:
        return Location.from_distance((point - self.center).length() - self.radius)


@dataclass(frozen=True)
class CircleSegment:
    """Region cut from a circle by a chord.

    Attributes:
        area: Area of the segment.
        offset: Distance of the segment centroid from the circle center,
            along the chord normal.
    """
    area: float
    offset: float


def unit_circle_segment(dist: float) -> CircleSegment:
    """Segment of the unit circle cut by a chord at distance ``dist``.

    The segment is the part beyond the chord, on the side ``dist`` is
    measured towards. Close to tangency the closed form loses precision, so
    the boundary is approximated by a parabola there.
    """
    cosine = min(max(dist, -1.0), 1.0)
    sine = math.sqrt(1.0 - cosine ** 2)
    if abs(cosine) < 1.0 - EPS_CHORD:
        area = math.acos(cosine) - cosine * sine
        return CircleSegment(area, (2.0 / 3.0) * sine ** 3 / area)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Chord at cos=%g near tangency, using parabola approximation", cosine)
    y = 1.0 - abs(cosine)
    a = (4.0 / 3.0) * math.sqrt(2.0 * y) * y
    b = 1.0 - (3.0 / 10.0) * y
    if cosine > 0.0:
        return CircleSegment(a, b)
    return CircleSegment(math.pi - a, -b * a / (math.pi - a))


def circle_segment(radius: float, dist: float) -> CircleSegment:
    """Segment of a circle of ``radius`` cut by a chord at distance ``dist``.

    A zero radius gives an empty segment, or NaN when ``dist`` is also zero.
    """
    if radius == 0:
        unit_dist = math.copysign(math.inf, dist) if dist != 0 else math.nan
    else:
        unit_dist = dist / radius
    unit = unit_circle_segment(unit_dist)
    return CircleSegment(unit.area * radius ** 2, unit.offset * radius)


@register(HalfPlane, Circle, output=Clump)
def half_plane_circle(plane: HalfPlane, circle: Circle) -> Optional[Clump]:
    """Part of ``circle`` lying in the occupied side of ``plane``."""
    dist = plane.distance(circle.center)
    if dist >= circle.radius:
        return None
    if dist > -circle.radius:
        segment = circle_segment(circle.radius, dist)
        return Clump(circle.center - plane.normal * segment.offset, segment.area)
    return circle.clump()


@register(Circle, Circle, output=Clump)
def circle_circle(first: Circle, second: Circle) -> Optional[Clump]:
    """Lens shared by two circles."""
    # Points from the first center to the second one
    vec = second.center - first.center
    dist = vec.length()
    if dist >= first.radius + second.radius:
        return None
    if dist <= abs(first.radius - second.radius):
        smaller = first if first.radius < second.radius else second
        return smaller.clump()

    direction = vec / dist

    # Both chord offsets are measured to the radical line
    first_offset = 0.5 * (dist + (first.radius ** 2 - second.radius ** 2) / dist)
    second_offset = dist - first_offset

    first_segment = circle_segment(first.radius, first_offset)
    second_segment = circle_segment(second.radius, second_offset)

    return (
        Clump(first.center + direction * first_segment.offset, first_segment.area)
        + Clump(second.center - direction * second_segment.offset, second_segment.area)
    )
