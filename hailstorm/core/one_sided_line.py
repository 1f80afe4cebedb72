"""
Half-infinite ray used to clip a trajectory against a rectangle.

The ray never materializes its unbounded tail; it only ever produces the
bounded LineSegment that lies inside a given box.
"""

import math
from typing import List, Optional

from .line import Line
from .line_segment import LineSegment
from .point import Point
from ..utils.geometry import EPSILON, in_range, scaled_eps


class OneSidedLine:
    """
    A ray starting at an origin and extending along a direction.

    Attributes:
        origin (Point): Start of the ray
        direction (Point): Direction vector (need not be normalized)
        line (Line): Supporting infinite line
    """

    def __init__(self, origin: Point, direction: Point):
        """
        Initialize the ray.

        Args:
            origin: Start of the ray
            direction: Direction of travel

        Raises:
            ValueError: If the direction is the zero vector
        """
        if direction.sign() == (0, 0):
            raise ValueError(f"Ray from {origin} needs a non-zero direction")

        self.origin = origin
        self.direction = direction
        self.line = Line(origin, origin + direction)

    def is_ahead(self, point: Point) -> bool:
        """
        True if the point lies strictly ahead of the origin along the ray.

        The test uses the ray parameter of the point, the projection of
        (point - origin) onto the direction, so rounding in the component
        the ray does not move along cannot flip the answer. The point must
        clear the origin by a tolerance relative to the coordinates
        involved.
        """
        t = (point - self.origin).dot(self.direction)
        tolerance = scaled_eps(EPSILON, self.origin.x, self.origin.y, point.x, point.y)
        return t > tolerance * math.hypot(self.direction.x, self.direction.y)

    def _same_point(self, a: Point, b: Point) -> bool:
        return a.is_close(b, scaled_eps(EPSILON, a.x, a.y, b.x, b.y))

    def box_intersect(self, top_left: Point, bottom_right: Point) -> Optional[LineSegment]:
        """
        Clip the ray to an axis-aligned rectangle.

        Each of the four rectangle edges is intersected with the ray's
        supporting line; crossings behind the origin are ignored. A ray that
        starts inside the box crosses its boundary once, a ray that passes
        through the box crosses it twice.

        Args:
            top_left: One corner of the rectangle
            bottom_right: The opposite corner

        Returns:
            The portion of the ray inside the rectangle, or None if the ray
            never enters it

        Example:
            >>> ray = OneSidedLine(Point(19, 13), Point(-2, 1))
            >>> ray.box_intersect(Point(7, 7), Point(27, 27))
            LineSegment(Point(7, 19) -> Point(19, 13))
        """
        x_min, x_max = sorted((top_left.x, bottom_right.x))
        y_min, y_max = sorted((top_left.y, bottom_right.y))
        corners = [
            Point(x_min, y_min),
            Point(x_max, y_min),
            Point(x_max, y_max),
            Point(x_min, y_max),
        ]
        edges = [LineSegment(corners[i], corners[(i + 1) % 4]) for i in range(4)]

        crossings: List[Point] = []
        for edge in edges:
            result = self.line.intersect(edge.line)
            if not result.is_point:
                continue
            point = result.point
            if not edge.contains_coordinate(point) or not self.is_ahead(point):
                continue
            if any(self._same_point(point, seen) for seen in crossings):
                continue
            crossings.append(point)

        if not crossings:
            return None

        if len(crossings) == 1:
            inside = (in_range(self.origin.x, x_min, x_max) and
                      in_range(self.origin.y, y_min, y_max))
            if not inside or self._same_point(crossings[0], self.origin):
                return None
            return LineSegment(self.origin, crossings[0])

        return LineSegment(crossings[0], crossings[1])

    def __repr__(self) -> str:
        return f"OneSidedLine({self.origin} along {self.direction})"
