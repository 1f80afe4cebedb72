"""
2D point with tolerance-based equality.

Points are the common currency of every geometric primitive: line
construction, segment endpoints, ray origins and sweep event locations.
"""

from typing import Tuple

from ..utils.geometry import EPSILON, approx_eq, sign


class Point:
    """
    A 2D coordinate supporting vector arithmetic.

    Equality is epsilon-tolerant, so points are deliberately unhashable.

    Attributes:
        x (float): X-coordinate
        y (float): Y-coordinate
    """

    __hash__ = None

    def __init__(self, x: float, y: float):
        self.x = float(x)
        self.y = float(y)

    @classmethod
    def from_tuple(cls, coords: Tuple[float, float]) -> 'Point':
        """Build a point from an (x, y) tuple."""
        return cls(coords[0], coords[1])

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def is_close(self, other: 'Point', eps: float = EPSILON) -> bool:
        """
        Test if two points coincide within a tolerance.

        Args:
            other: Point to compare against
            eps: Per-axis absolute tolerance

        Returns:
            True if both coordinates differ by less than eps
        """
        return approx_eq(self.x, other.x, eps) and approx_eq(self.y, other.y, eps)

    def precedes(self, other: 'Point', eps: float = EPSILON) -> bool:
        """
        Test if this point comes strictly before another in sweep order.

        Sweep order is ascending x, then ascending y for points sharing an x.

        Args:
            other: Point to compare against
            eps: Tolerance applied on each axis

        Returns:
            True if this point is visited first by a left-to-right sweep

        Example:
            >>> Point(1, 5).precedes(Point(2, 0))
            True
            >>> Point(2, 0).precedes(Point(2, 1))
            True
        """
        if not approx_eq(self.x, other.x, eps):
            return self.x < other.x
        if not approx_eq(self.y, other.y, eps):
            return self.y < other.y
        return False

    def sign(self) -> Tuple[int, int]:
        """Component-wise sign (-1, 0 or 1 on each axis)."""
        return (sign(self.x), sign(self.y))

    def dot(self, other: 'Point') -> float:
        """Dot product, treating both points as vectors."""
        return self.x * other.x + self.y * other.y

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.is_close(other)

    def __add__(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Point') -> 'Point':
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> 'Point':
        return Point(-self.x, -self.y)

    def __repr__(self) -> str:
        return f"Point({self.x:g}, {self.y:g})"
