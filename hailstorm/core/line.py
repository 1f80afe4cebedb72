"""
Infinite line representation and intersection classification.

A Line is built from two distinct points and classifies its relationship
with another line as a single crossing point, parallel-and-distinct, or the
very same line. The result is a tagged value rather than an exception so
every geometric configuration has a defined outcome.
"""

import math
from enum import Enum
from typing import Optional

from .point import Point
from ..utils.geometry import EPSILON, approx_eq


class IntersectionKind(Enum):
    """Outcome of intersecting two lines or two segments."""
    POINT = "point"
    PARALLEL = "parallel"
    SAME_LINE = "same_line"
    NONE = "none"
    OVERLAP = "overlap"


class Intersection:
    """
    Tagged intersection result.

    Attributes:
        kind (IntersectionKind): Classification of the result
        point (Optional[Point]): Crossing location when kind is POINT
        segment: Shared sub-segment when kind is OVERLAP
    """

    def __init__(self, kind: IntersectionKind, point: Optional[Point] = None, segment=None):
        self.kind = kind
        self.point = point
        self.segment = segment

    @property
    def is_point(self) -> bool:
        return self.kind is IntersectionKind.POINT

    def __repr__(self) -> str:
        if self.kind is IntersectionKind.POINT:
            return f"Intersection(POINT, {self.point})"
        if self.kind is IntersectionKind.OVERLAP:
            return f"Intersection(OVERLAP, {self.segment})"
        return f"Intersection({self.kind.name})"


PARALLEL = Intersection(IntersectionKind.PARALLEL)
SAME_LINE = Intersection(IntersectionKind.SAME_LINE)
NO_INTERSECTION = Intersection(IntersectionKind.NONE)


class Line:
    """
    Infinite line through two points.

    Attributes:
        origin (Point): First point used to build the line
        dx (float): X component of the direction
        dy (float): Y component of the direction
        c (float): General-form constant, dy*x - dx*y = c
        slope (Optional[float]): dy/dx, None for vertical lines
        y_intercept (Optional[float]): Y at x=0, None for vertical lines
        intercept (float): Y-intercept for sloped lines and x-intercept for
            vertical ones, so "same line" is one comparison either way
    """

    def __init__(self, a: Point, b: Point):
        """
        Initialize the line through a and b.

        Args:
            a: First point
            b: Second point

        Raises:
            ValueError: If a and b coincide
        """
        if a == b:
            raise ValueError(f"Cannot build a line from identical points {a} and {b}")

        self.origin = a
        self.dx = b.x - a.x
        self.dy = b.y - a.y
        self.c = a.x * self.dy - a.y * self.dx

        if not approx_eq(self.dx, 0.0):
            self.slope = self.dy / self.dx
            self.y_intercept = a.y - self.slope * a.x
            self.intercept = self.y_intercept
        else:
            self.slope = None
            self.y_intercept = None
            self.intercept = a.x + a.y * self.dx / self.dy

    @classmethod
    def from_points(cls, a: Point, b: Point) -> 'Line':
        return cls(a, b)

    @property
    def is_vertical(self) -> bool:
        return self.slope is None

    @property
    def is_horizontal(self) -> bool:
        return approx_eq(self.dy, 0.0)

    def intersect(self, other: 'Line') -> Intersection:
        """
        Classify the intersection of two lines.

        Uses the determinant of the two direction vectors. A zero determinant
        means the lines are parallel; the intercepts then tell distinct
        parallels apart from the same line. Otherwise Cramer's rule gives the
        unique crossing point, except that a vertical or horizontal line pins
        its own coordinate exactly and the other one is read off the second
        line.

        Args:
            other: Line to intersect with

        Returns:
            Intersection of kind POINT, PARALLEL or SAME_LINE

        Example:
            >>> Line(Point(0, 0), Point(1, 1)).intersect(Line(Point(0, 2), Point(2, 0)))
            Intersection(POINT, Point(1, 1))
        """
        det = self.dx * other.dy - self.dy * other.dx
        scale = math.hypot(self.dx, self.dy) * math.hypot(other.dx, other.dy)

        if approx_eq(det / scale, 0.0):
            if self.is_vertical != other.is_vertical:
                return PARALLEL
            tolerance = EPSILON * max(1.0, abs(self.intercept), abs(other.intercept))
            if approx_eq(self.intercept, other.intercept, tolerance):
                return SAME_LINE
            return PARALLEL

        x = y = None
        if self.is_vertical:
            x = self.origin.x
        elif other.is_vertical:
            x = other.origin.x
        if self.is_horizontal:
            y = self.origin.y
        elif other.is_horizontal:
            y = other.origin.y

        if x is None and y is None:
            x = (self.dx * other.c - other.dx * self.c) / det
            y = (self.dy * other.c - other.dy * self.c) / det
        elif y is None:
            y = (other if self.is_vertical else self).point_at_x(x).y
        elif x is None:
            x = (other if self.is_horizontal else self).point_at_y(y).x
        return Intersection(IntersectionKind.POINT, point=Point(x, y))

    def point_at_x(self, x: float) -> Optional[Point]:
        """Point on the line at the given x, or None for a vertical line."""
        if self.is_vertical:
            return None
        return Point(x, self.origin.y + (x - self.origin.x) * self.slope)

    def point_at_y(self, y: float) -> Optional[Point]:
        """Point on the line at the given y, or None for a horizontal line."""
        if self.is_horizontal:
            return None
        return Point(self.origin.x + (y - self.origin.y) * self.dx / self.dy, y)

    def __repr__(self) -> str:
        if self.is_vertical:
            return f"Line(x={self.intercept:g})"
        return f"Line(slope={self.slope:g}, y_intercept={self.y_intercept:g})"
