"""
Axis-aligned target area in which crossings are counted.

This module defines the TargetArea class which encapsulates the rectangle
that trajectories are clipped against, including its boundaries and
containment checks.
"""

from typing import List, Optional, Tuple

from .line_segment import LineSegment
from .one_sided_line import OneSidedLine
from .point import Point
from ..utils.geometry import in_range


class TargetArea:
    """
    Represents the rectangular test area.

    Attributes:
        bounds (Tuple[float, float, float, float]): (x_min, y_min, x_max, y_max)
    """

    def __init__(self, x_min: float, y_min: float, x_max: float, y_max: float):
        """
        Initialize the target area.

        Swapped bounds are normalized, so any two opposite corners work.

        Args:
            x_min: Left boundary
            y_min: Lower boundary
            x_max: Right boundary
            y_max: Upper boundary

        Raises:
            ValueError: If the area has zero width or height

        Example:
            >>> area = TargetArea(7, 7, 27, 27)
            >>> area.contains(Point(14.3, 15.3))
            True
        """
        x_min, x_max = sorted((float(x_min), float(x_max)))
        y_min, y_max = sorted((float(y_min), float(y_max)))
        if x_min == x_max or y_min == y_max:
            raise ValueError(f"Target area must have a non-zero width and height, "
                             f"got x=[{x_min}, {x_max}], y=[{y_min}, {y_max}]")
        self.bounds = (x_min, y_min, x_max, y_max)

    @classmethod
    def from_corners(cls, top_left: Point, bottom_right: Point) -> 'TargetArea':
        return cls(top_left.x, top_left.y, bottom_right.x, bottom_right.y)

    @property
    def top_left(self) -> Point:
        return Point(self.bounds[0], self.bounds[1])

    @property
    def bottom_right(self) -> Point:
        return Point(self.bounds[2], self.bounds[3])

    def corners(self) -> List[Point]:
        """Corners in order: (min, min), (max, min), (max, max), (min, max)."""
        x_min, y_min, x_max, y_max = self.bounds
        return [
            Point(x_min, y_min),
            Point(x_max, y_min),
            Point(x_max, y_max),
            Point(x_min, y_max),
        ]

    def edges(self) -> List[LineSegment]:
        """The four boundary edges as segments."""
        corners = self.corners()
        return [LineSegment(corners[i], corners[(i + 1) % 4]) for i in range(4)]

    def contains(self, point: Point) -> bool:
        """Check if a point is inside the area, boundary included."""
        x_min, y_min, x_max, y_max = self.bounds
        return in_range(point.x, x_min, x_max) and in_range(point.y, y_min, y_max)

    def clip(self, ray: OneSidedLine) -> Optional[LineSegment]:
        """Portion of a ray inside the area, or None."""
        return ray.box_intersect(self.top_left, self.bottom_right)

    def size(self) -> Tuple[float, float]:
        x_min, y_min, x_max, y_max = self.bounds
        return (x_max - x_min, y_max - y_min)

    def __repr__(self) -> str:
        return f"TargetArea(bounds={self.bounds})"
