"""
Sweep-line crossing count (Bentley-Ottmann).

A vertical line sweeps left to right over the segments. Three kinds of
event change what it sees:

- Start: a segment joins the active order and is tested against its new
  neighbours.
- End: a segment leaves; its former neighbours become adjacent and are
  tested against each other.
- Intersection: two neighbours cross and swap places; each then has a new
  neighbour to test.

Only neighbours in the active order are ever tested, so every crossing is
found just before the two segments involved swap. A segment that starts on
another one touches it at its start point; the insertion already puts the
pair in the order they have past that point, so the touch is counted on
the spot instead of being scheduled.

Vertical segments lie along the sweep line. They are ordered at the
sweep's current y, clamped to their span, and move up past each segment
they cross while the sweep climbs their x.
"""

import time
from typing import Any, Dict, Optional

from .active_order import ActiveOrder
from .events import Event, EventKind, EventQueue
from ..core.point import Point
from ..core.solver import IntersectionSolver
from ..utils.geometry import EPSILON, scaled_eps


class SweepLineSolver(IntersectionSolver):
    """
    Event-driven sweep over the segments.

    Attributes:
        epsilon (float): Tolerance for ordering and duplicate detection
        check_invariants (bool): Verify the active order after every event
        events (EventQueue): Pending events
        order (ActiveOrder): Segments crossing the sweep line
        sweep_position (Optional[Point]): Location of the last event
        last_counted (Optional[Point]): Location of the last crossing counted
        events_processed (int): Events handled so far
        max_active (int): Largest active order size seen
    """

    def _initialize_algorithm(self) -> None:
        """Build the event queue and the active order from the segments."""
        self.epsilon = float(self.parameters.get('epsilon', EPSILON))
        self.check_invariants = bool(self.parameters.get('check_order', False))

        self.events = EventQueue(self.epsilon)
        for segment_id, segment in enumerate(self.segments):
            if segment is None:
                continue
            self.events.push(Event.start(segment.from_point, segment_id))
            self.events.push(Event.end(segment.to_point, segment_id))

        self.order = ActiveOrder(self.segments, self.epsilon)
        self.sweep_position: Optional[Point] = None
        self.last_counted: Optional[Point] = None
        self.events_processed = 0
        self.max_active = 0

    def solve(self) -> int:
        """
        Run the sweep to completion.

        Returns:
            Number of distinct crossing points
        """
        start_time = time.time()

        while self.step() is not None:
            pass

        self.solve_time = time.time() - start_time
        return self.intersections

    def step(self) -> Optional[Event]:
        """
        Process a single event.

        Returns:
            The event that was processed, or None once the queue is empty
        """
        event = self.events.pop()
        if event is None:
            return None

        p = event.point
        if self.sweep_position is not None:
            assert not p.precedes(self.sweep_position, self.epsilon), (
                f"Sweep moved backwards from {self.sweep_position} to {p}")

        if event.kind is EventKind.START:
            self._handle_start(p, event.segment_ids[0])
        elif event.kind is EventKind.END:
            self._handle_end(p, event.segment_ids[0])
        else:
            self._handle_intersection(p, *event.segment_ids)

        self.sweep_position = p
        self.events_processed += 1
        self.max_active = max(self.max_active, len(self.order))

        if self.check_invariants:
            self.order.check_order(p)

        return event

    def _handle_start(self, p: Point, segment_id: int) -> None:
        position = self.order.add(segment_id, p)

        next_id = self.order.get_next_id(position)
        if next_id is not None:
            self._schedule(p, segment_id, next_id, starting=True)

        prev_id = self.order.get_prev_id(position)
        if prev_id is not None:
            self._schedule(p, prev_id, segment_id, starting=True)

    def _handle_end(self, p: Point, segment_id: int) -> None:
        position = self.order.get_pos(segment_id)

        prev_id = self.order.get_prev_id(position)
        next_id = self.order.get_next_id(position)
        if prev_id is not None and next_id is not None:
            self._schedule(p, prev_id, next_id)

        self.order.delete(position)

    def _handle_intersection(self, p: Point, first_id: int, second_id: int) -> None:
        self._count(p)

        lower = self.order.get_pos(first_id)
        upper = self.order.get_pos(second_id)
        if lower > upper:
            lower, upper = upper, lower
        assert upper == lower + 1, (
            f"Segments {first_id} and {second_id} cross at {p} but are not neighbours")

        self.order.swap(lower, upper)

        # the segment that moved up meets a new successor, the one that
        # moved down a new predecessor
        moved_up = self.order.active[upper]
        next_id = self.order.get_next_id(upper)
        if next_id is not None:
            self._schedule(p, moved_up, next_id)

        moved_down = self.order.active[lower]
        prev_id = self.order.get_prev_id(lower)
        if prev_id is not None:
            self._schedule(p, prev_id, moved_down)

    def _schedule(self, p: Point, lower_id: int, upper_id: int, starting: bool = False) -> None:
        """
        Queue the crossing of two neighbours if it lies ahead of the sweep.

        The pair is always intersected in ascending id order, so the same
        crossing found from either side has identical coordinates.

        Args:
            p: Current sweep location
            lower_id: Segment below
            upper_id: Segment above
            starting: True when one of the pair starts at p; a crossing
                at p is then a touch, counted here, and one behind p is
                impossible
        """
        first, second = sorted((lower_id, upper_id))
        result = self.segments[first].intersect(self.segments[second])
        if not result.is_point:
            return

        crossing = result.point
        if starting:
            if self._same_location(crossing, p):
                if self.last_counted is None or not self._same_location(self.last_counted, p):
                    self._count(p)
                return
            assert not crossing.precedes(p, self.epsilon), (
                f"Segments {lower_id} and {upper_id} cross at {crossing}, "
                f"behind the sweep at {p}")
        if p.precedes(crossing, self.epsilon):
            self.events.push(Event.intersection(crossing, lower_id, upper_id))

    def _count(self, p: Point) -> None:
        self.intersections += 1
        self.intersection_points.append(p)
        self.last_counted = p

    def _same_location(self, a: Point, b: Point) -> bool:
        return a.is_close(b, scaled_eps(self.epsilon, a.x, a.y, b.x, b.y))

    def get_metrics(self) -> Dict[str, Any]:
        """
        Get sweep statistics.

        Returns:
            Dictionary with solver statistics
        """
        return {
            'algorithm': 'Sweep Line',
            'intersections': self.intersections,
            'segments': self.segment_count(),
            'events_processed': self.events_processed,
            'duplicates_discarded': self.events.duplicates_discarded,
            'max_active': self.max_active,
            'solve_time': self.solve_time
        }
