"""
Order-maintained set of the segments currently crossing the sweep line.

The structure is two parallel arrays over integer segment ids:

    active[sorted_pos]   -> segment id, bottom to top at the sweep x
    position_of[seg_id]  -> sorted position, or None while inactive

Both are sized to the segment count up front. Only adjacent entries are
ever swapped: two segments can only newly cross while they are neighbours.
"""

from typing import List, Optional, Sequence

from ..core.line_segment import LineSegment
from ..core.point import Point
from ..utils.geometry import EPSILON, approx_cmp


class ActiveOrder:
    """
    Segments crossing the sweep line, sorted by y at the sweep position.

    Attributes:
        segments (Sequence[Optional[LineSegment]]): Segment arena by id
        active (List[int]): Active segment ids in ascending y order
        position_of (List[Optional[int]]): Reverse index of active
        active_count (int): Number of valid entries at the front of active
        epsilon (float): Tolerance for y comparisons
    """

    def __init__(self, segments: Sequence[Optional[LineSegment]], epsilon: float = EPSILON):
        n = len(segments)
        self.segments = segments
        self.active: List[int] = [0] * n
        self.position_of: List[Optional[int]] = [None] * n
        self.active_count = 0
        self.epsilon = epsilon

    def get(self, segment_id: int) -> LineSegment:
        return self.segments[segment_id]

    def get_pos(self, segment_id: int) -> int:
        """Sorted position of an active segment."""
        position = self.position_of[segment_id]
        assert position is not None, f"Segment {segment_id} is not active"
        return position

    def get_prev_id(self, position: int) -> Optional[int]:
        """Id of the segment just below a sorted position, if any."""
        if position == 0:
            return None
        return self.active[position - 1]

    def get_next_id(self, position: int) -> Optional[int]:
        """Id of the segment just above a sorted position, if any."""
        if position + 1 >= self.active_count:
            return None
        return self.active[position + 1]

    def ids(self) -> List[int]:
        """Active segment ids, bottom to top."""
        return self.active[:self.active_count]

    def find(self, p: Point, segment_id: Optional[int] = None) -> int:
        """
        Insertion position for a point on the sweep line.

        Bisects the active entries by comparing p.y with the y at which each
        candidate meets the sweep line at p. When p lies on a candidate, the
        slope of the segment being inserted decides: the flatter segment sits
        lower just right of p, and a vertical one sits above every sloped
        segment through p.

        Args:
            p: Point on the sweep line
            segment_id: Segment that will be inserted at p, used for ties

        Returns:
            Sorted position at which the segment belongs
        """
        new_slope = None if segment_id is None else self.get(segment_id).slope
        low, high = 0, self.active_count

        while low < high:
            mid = (low + high) // 2
            candidate = self.get(self.active[mid])
            order = approx_cmp(p.y, candidate.sweep_y(p), self.epsilon)
            if order == 0 and new_slope is not None:
                order = 1 if new_slope > candidate.slope else -1
            if order > 0:
                low = mid + 1
            else:
                high = mid

        return low

    def add(self, segment_id: int, p: Point) -> int:
        """
        Insert a segment starting at p.

        Returns:
            Sorted position the segment was placed at
        """
        position = self.find(p, segment_id)
        for i in range(self.active_count - 1, position - 1, -1):
            moved = self.active[i]
            self.active[i + 1] = moved
            self.position_of[moved] += 1
        self.active[position] = segment_id
        self.position_of[segment_id] = position
        self.active_count += 1
        return position

    def delete(self, position: int) -> None:
        """Remove the segment at a sorted position."""
        removed = self.active[position]
        assert self.position_of[removed] == position
        self.position_of[removed] = None
        for i in range(position + 1, self.active_count):
            moved = self.active[i]
            self.active[i - 1] = moved
            self.position_of[moved] -= 1
        self.active_count -= 1

    def swap(self, lower: int, upper: int) -> None:
        """
        Exchange two neighbouring entries.

        Args:
            lower: Sorted position of the lower segment
            upper: Sorted position of the upper segment; must be lower + 1
        """
        assert upper == lower + 1, f"Only neighbours can swap, got {lower} and {upper}"
        below, above = self.active[lower], self.active[upper]
        self.active[lower], self.active[upper] = above, below
        self.position_of[above] = lower
        self.position_of[below] = upper

    def check_order(self, p: Point, epsilon: Optional[float] = None) -> None:
        """
        Assert that the active entries are sorted by y on the sweep line at p.

        Recomputes every active segment's y value, so this is a debugging
        aid rather than something to leave on for large inputs.
        """
        eps = self.epsilon if epsilon is None else epsilon
        previous = None
        for position, segment_id in enumerate(self.ids()):
            assert self.position_of[segment_id] == position
            y = self.get(segment_id).sweep_y(p)
            if previous is not None:
                assert approx_cmp(previous, y, eps) <= 0, (
                    f"Active order broken at x={p.x}: position {position} "
                    f"(segment {segment_id}, y={y}) is below y={previous}")
            previous = y

    def __len__(self) -> int:
        return self.active_count

    def __repr__(self) -> str:
        return f"ActiveOrder({self.ids()})"
