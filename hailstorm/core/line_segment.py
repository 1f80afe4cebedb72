"""
Bounded line segment with canonically ordered endpoints.

Endpoints are sorted at construction time (lower x first, or lower y first
for vertical segments). Every range check and every sweep comparison relies
on this ordering: `from_point` is always where the sweep meets the segment
first and `to_point` is where it leaves.
"""

from operator import attrgetter
from typing import Optional

from .line import Line, Intersection, IntersectionKind, NO_INTERSECTION
from .point import Point
from ..utils.geometry import in_range


class LineSegment:
    """
    A bounded portion of a Line.

    Attributes:
        from_point (Point): Canonical start (lower x, or lower y if vertical)
        to_point (Point): Canonical end
        line (Line): Supporting line, built from the ordered endpoints
    """

    def __init__(self, a: Point, b: Point):
        """
        Initialize the segment between a and b.

        The argument order does not matter: LineSegment(a, b) and
        LineSegment(b, a) produce identical internal state.

        Args:
            a: One endpoint
            b: The other endpoint

        Raises:
            ValueError: If a and b coincide
        """
        line = Line(a, b)
        if line.is_vertical:
            swap = a.y > b.y
        else:
            swap = a.x > b.x
        if swap:
            a, b = b, a
            line = Line(a, b)

        self.from_point = a
        self.to_point = b
        self.line = line

    @property
    def is_vertical(self) -> bool:
        return self.line.is_vertical

    @property
    def slope(self) -> float:
        """Slope of the segment; vertical segments report +inf."""
        return float('inf') if self.is_vertical else self.line.slope

    def contains_coordinate(self, point: Point) -> bool:
        """
        Test if a point on the supporting line falls within the segment.

        The check runs along the dominant axis only: x for sloped segments,
        y for vertical ones.
        """
        if self.is_vertical:
            return in_range(point.y, self.from_point.y, self.to_point.y)
        return in_range(point.x, self.from_point.x, self.to_point.x)

    def intersect(self, other: 'LineSegment') -> Intersection:
        """
        Intersect two segments.

        Delegates to Line.intersect and restricts the result to both
        segments' extents. Collinear segments are refined into no overlap,
        a single touching point, or the overlapping sub-segment.

        Args:
            other: Segment to intersect with

        Returns:
            Intersection of kind POINT, NONE or OVERLAP

        Example:
            >>> a = LineSegment(Point(0, 0), Point(10, 10))
            >>> b = LineSegment(Point(0, 10), Point(10, 0))
            >>> a.intersect(b)
            Intersection(POINT, Point(5, 5))
        """
        result = self.line.intersect(other.line)

        if result.kind is IntersectionKind.POINT:
            if self.contains_coordinate(result.point) and other.contains_coordinate(result.point):
                return result
            return NO_INTERSECTION

        if result.kind is IntersectionKind.SAME_LINE:
            return self._overlap(other)

        return NO_INTERSECTION

    def _overlap(self, other: 'LineSegment') -> Intersection:
        """Shared part of two collinear segments."""
        key = attrgetter('y' if self.is_vertical else 'x')

        start = max(self.from_point, other.from_point, key=key)
        end = min(self.to_point, other.to_point, key=key)

        if start == end:
            return Intersection(IntersectionKind.POINT, point=start)
        if key(start) > key(end):
            return NO_INTERSECTION
        return Intersection(IntersectionKind.OVERLAP, segment=LineSegment(start, end))

    def point_at_x(self, x: float) -> Optional[Point]:
        """
        Point of the segment at the given x.

        Returns:
            None if x lies outside the segment, the lower endpoint for a
            vertical segment, otherwise the point on the supporting line
        """
        if not in_range(x, self.from_point.x, self.to_point.x):
            return None
        if self.is_vertical:
            return self.from_point
        return self.line.point_at_x(x)

    def y_at(self, x: float) -> float:
        """Y of the supporting line at x, without a range check."""
        if self.is_vertical:
            return self.from_point.y
        return self.line.point_at_x(x).y

    def sweep_y(self, p: Point) -> float:
        """
        Y at which the segment meets a sweep line positioned at p.

        A sloped segment is evaluated at p.x. A vertical segment lies along
        the sweep line, so it is taken to sit at p.y clamped to its own span:
        as the sweep climbs its x the segment moves up past every segment it
        crosses there.
        """
        if self.is_vertical:
            return min(max(p.y, self.from_point.y), self.to_point.y)
        return self.line.point_at_x(p.x).y

    def length(self) -> float:
        delta = self.to_point - self.from_point
        return (delta.x ** 2 + delta.y ** 2) ** 0.5

    def __eq__(self, other) -> bool:
        if not isinstance(other, LineSegment):
            return NotImplemented
        return self.from_point == other.from_point and self.to_point == other.to_point

    __hash__ = None

    def __repr__(self) -> str:
        return f"LineSegment({self.from_point} -> {self.to_point})"
