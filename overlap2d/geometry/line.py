"""Lines, segments and their intersection points.

Intersections are computed from the parametric forms ``p + u*r`` and
``q + v*s`` with 2D cross products. When ``r x s`` vanishes the two
operands are parallel, or one of them has collapsed to a point, and each of
those cases returns a well defined representative point or None.
"""

from dataclasses import dataclass
from typing import NamedTuple, Optional

from ..constants import EPS_LINE
from ..intersect import Intersectable, register
from .types import Point


def _is_null(vec: Point) -> bool:
    return vec.abs().max_element() < EPS_LINE


def _is_proper(vec: Point) -> bool:
    return vec.abs().max_element() > EPS_LINE


def _in_unit_range(t: float) -> bool:
    return -EPS_LINE <= t <= 1.0 + EPS_LINE


class _Crossing(NamedTuple):
    """Cross products shared by every line/segment pair."""
    p: Point
    q: Point
    r: Point
    s: Point
    pq: Point
    den: float
    pqr: float
    pqs: float


def _crossing(p0: Point, p1: Point, q0: Point, q1: Point) -> _Crossing:
    r = p1 - p0
    s = q1 - q0
    pq = q0 - p0
    return _Crossing(
        p=p0, q=q0, r=r, s=s, pq=pq,
        den=r.perp_dot(s),
        pqr=pq.perp_dot(r),
        pqs=pq.perp_dot(s),
    )


@dataclass(frozen=True)
class Line(Intersectable):
    """Infinite line through two points."""
    p0: Point
    p1: Point

    def __post_init__(self):
        object.__setattr__(self, "p0", Point.of(self.p0))
        object.__setattr__(self, "p1", Point.of(self.p1))

    def is_degenerate(self) -> bool:
        return _is_null(self.p1 - self.p0)

    def contains(self, point: Point) -> bool:
        r = self.p1 - self.p0
        if _is_null(r):
            return _is_null(point - self.p0)
        return abs(r.perp_dot(point - self.p0)) < EPS_LINE


@dataclass(frozen=True)
class LineSegment(Intersectable):
    """Line segment bounded by two points."""
    p0: Point
    p1: Point

    def __post_init__(self):
        object.__setattr__(self, "p0", Point.of(self.p0))
        object.__setattr__(self, "p1", Point.of(self.p1))

    def to_line(self) -> Line:
        return Line(self.p0, self.p1)

    def is_degenerate(self) -> bool:
        return self.to_line().is_degenerate()

    def length(self) -> float:
        return (self.p1 - self.p0).length()

    def midpoint(self) -> Point:
        return self.p0 + 0.5 * (self.p1 - self.p0)

    def contains(self, point: Point) -> bool:
        """Check if a point lies on this segment (within EPS_LINE)."""
        r = self.p1 - self.p0
        if _is_null(r):
            return _is_null(point - self.p0)

        if abs(r.perp_dot(point - self.p0)) > EPS_LINE:
            return False

        # Projection must fall between the endpoints
        dot = (point - self.p0).dot(r)
        return -EPS_LINE <= dot <= r.length_squared() + EPS_LINE


@register(Line, Line, output=Point)
def line_line(first: Line, second: Line) -> Optional[Point]:
    c = _crossing(first.p0, first.p1, second.p0, second.p1)

    if abs(c.den) > EPS_LINE:
        return first.p0.lerp(first.p1, c.pqs / c.den)

    first_proper, second_proper = _is_proper(c.r), _is_proper(c.s)
    if first_proper and second_proper:
        # Parallel; coincident lines share every point, return the first one
        return c.p if abs(c.pqs) < EPS_LINE else None
    if second_proper:
        # `first` is a single point
        return c.p if abs(c.pqs) < EPS_LINE else None
    if first_proper:
        # `second` is a single point
        return c.q if abs(c.pqr) < EPS_LINE else None
    return c.p if _is_null(c.pq) else None


@register(LineSegment, Line, output=Point)
def segment_line(segment: LineSegment, line: Line) -> Optional[Point]:
    c = _crossing(segment.p0, segment.p1, line.p0, line.p1)

    if abs(c.den) > EPS_LINE:
        u = c.pqs / c.den
        return segment.p0.lerp(segment.p1, u) if _in_unit_range(u) else None

    segment_proper, line_proper = _is_proper(c.r), _is_proper(c.s)
    if segment_proper and line_proper:
        # Segment lying on the line overlaps it entirely; use its midpoint
        return c.p + 0.5 * c.r if abs(c.pqs) < EPS_LINE else None
    if line_proper:
        # Segment is a single point
        return c.p if abs(c.pqs) < EPS_LINE else None
    if segment_proper:
        # Line is a single point, it must fall within the segment
        u = c.pq.dot(c.r) / c.r.length_squared()
        return c.q if abs(c.pqr) < EPS_LINE and _in_unit_range(u) else None
    return c.p if _is_null(c.pq) else None


@register(LineSegment, LineSegment, output=Point)
def segment_segment(first: LineSegment, second: LineSegment) -> Optional[Point]:
    c = _crossing(first.p0, first.p1, second.p0, second.p1)

    if abs(c.den) > EPS_LINE:
        u = c.pqs / c.den
        v = c.pqr / c.den
        if _in_unit_range(u) and _in_unit_range(v):
            return first.p0.lerp(first.p1, u)
        return None

    first_proper, second_proper = _is_proper(c.r), _is_proper(c.s)
    if first_proper and second_proper:
        if abs(c.pqr) >= EPS_LINE:
            # Parallel but not collinear
            return None

        # Collinear: project `second` onto the parametrization of `first`
        r_len_sq = c.r.length_squared()
        t0 = c.pq.dot(c.r) / r_len_sq
        t1 = (c.pq + c.s).dot(c.r) / r_len_sq
        t_min, t_max = min(t0, t1), max(t0, t1)

        if t_max < -EPS_LINE or t_min > 1.0 + EPS_LINE:
            return None

        t_mid = (max(t_min, 0.0) + min(t_max, 1.0)) * 0.5
        return first.p0 + c.r * t_mid
    if second_proper:
        # `first` is a single point, it must fall within `second`
        v = -c.pq.dot(c.s) / c.s.length_squared()
        return c.p if abs(c.pqs) < EPS_LINE and _in_unit_range(v) else None
    if first_proper:
        # `second` is a single point, it must fall within `first`
        u = c.pq.dot(c.r) / c.r.length_squared()
        return c.q if abs(c.pqr) < EPS_LINE and _in_unit_range(u) else None
    return c.p if _is_null(c.pq) else None
