"""
Unit tests for sweep events and the event queue.
"""

from hailstorm.algorithms.events import Event, EventKind, EventQueue
from hailstorm.core.point import Point


class TestEventQueueOrdering:
    """Tests for pop order."""

    def test_orders_by_x_then_y(self):
        queue = EventQueue()
        queue.push(Event.start(Point(5, 0), 0))
        queue.push(Event.end(Point(1, 9), 1))
        queue.push(Event.start(Point(1, 2), 2))

        popped = [queue.pop().point for _ in range(3)]
        assert popped == [Point(1, 2), Point(1, 9), Point(5, 0)]
        assert queue.pop() is None

    def test_same_location_rank(self):
        """At one location crossings come before starts, starts before ends."""
        queue = EventQueue()
        queue.push(Event.start(Point(3, 3), 0))
        queue.push(Event.end(Point(3, 3), 1))
        queue.push(Event.intersection(Point(3, 3), 2, 3))

        kinds = [queue.pop().kind for _ in range(3)]
        assert kinds == [EventKind.INTERSECTION, EventKind.START, EventKind.END]

    def test_len_and_bool(self):
        queue = EventQueue()
        assert not queue
        queue.push(Event.start(Point(0, 0), 0))
        assert len(queue) == 1
        assert queue


class TestEventQueueDedup:
    """Tests for duplicate suppression."""

    def test_duplicate_intersection_discarded(self):
        """A crossing scheduled from both sides is returned once."""
        queue = EventQueue()
        queue.push(Event.intersection(Point(2, 2), 0, 1))
        queue.push(Event.intersection(Point(2, 2), 0, 1))
        queue.push(Event.end(Point(4, 4), 0))

        assert queue.pop().kind is EventKind.INTERSECTION
        assert queue.pop().kind is EventKind.END
        assert queue.pop() is None
        assert queue.duplicates_discarded == 1

    def test_intersection_identified_by_location(self):
        queue = EventQueue()
        queue.push(Event.intersection(Point(2, 2), 0, 1))
        queue.push(Event.intersection(Point(2, 2), 1, 0))

        queue.pop()
        assert queue.pop() is None

    def test_starts_of_different_segments_kept(self):
        """Two segments may start at the same point."""
        queue = EventQueue()
        queue.push(Event.start(Point(0, 0), 0))
        queue.push(Event.start(Point(0, 0), 1))

        ids = {queue.pop().segment_ids[0], queue.pop().segment_ids[0]}
        assert ids == {0, 1}
        assert queue.duplicates_discarded == 0

    def test_repeat_after_other_event_kept(self):
        """Only an event identical to the last one returned is dropped."""
        queue = EventQueue()
        queue.push(Event.intersection(Point(1, 1), 0, 1))
        assert queue.pop() is not None
        queue.push(Event.end(Point(1, 5), 0))
        assert queue.pop() is not None
        queue.push(Event.intersection(Point(1, 1), 0, 1))
        assert queue.pop() is not None


class TestEvent:
    """Tests for Event helpers."""

    def test_repr(self):
        assert repr(Event.intersection(Point(1, 2), 3, 4)) == "Intersection(Point(1, 2), 3, 4)"

    def test_same_as_none(self):
        assert not Event.start(Point(0, 0), 0).same_as(None)
