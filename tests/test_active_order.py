"""
Unit tests for the active order of the sweep.
"""

import pytest

from hailstorm.algorithms.active_order import ActiveOrder
from hailstorm.core.line_segment import LineSegment
from hailstorm.core.point import Point


@pytest.fixture
def horizontal_segments():
    """Four horizontal segments at y = 0, 10, 20, 30 spanning x = 0..100."""
    return [LineSegment(Point(0, y), Point(100, y)) for y in (0, 10, 20, 30)]


def fill(order, segment_ids):
    for segment_id in segment_ids:
        segment = order.get(segment_id)
        order.add(segment_id, segment.from_point)


class TestFindAndAdd:
    """Tests for find and add."""

    def test_empty_find(self, horizontal_segments):
        order = ActiveOrder(horizontal_segments)
        assert order.find(Point(0, 5)) == 0

    def test_add_keeps_y_order(self, horizontal_segments):
        """Segments inserted in any order end up sorted by y."""
        order = ActiveOrder(horizontal_segments)
        fill(order, [2, 0, 3, 1])
        assert order.ids() == [0, 1, 2, 3]
        assert order.position_of == [0, 1, 2, 3]
        assert len(order) == 4

    def test_find_between(self, horizontal_segments):
        order = ActiveOrder(horizontal_segments)
        fill(order, [0, 1, 3])
        assert order.find(Point(50, 15)) == 2
        assert order.find(Point(50, -5)) == 0
        assert order.find(Point(50, 35)) == 3

    def test_tie_broken_by_slope(self):
        """A segment starting on an active one goes above it if steeper."""
        segments = [
            LineSegment(Point(0, 0), Point(10, 0)),
            LineSegment(Point(5, 0), Point(10, 5)),
            LineSegment(Point(5, 0), Point(10, -5)),
        ]
        order = ActiveOrder(segments)
        order.add(0, segments[0].from_point)
        assert order.add(1, segments[1].from_point) == 1
        assert order.add(2, segments[2].from_point) == 0
        assert order.ids() == [2, 0, 1]


class TestDelete:
    """Tests for delete."""

    def test_delete_shifts_down(self, horizontal_segments):
        order = ActiveOrder(horizontal_segments)
        fill(order, [0, 1, 2, 3])
        order.delete(1)
        assert order.ids() == [0, 2, 3]
        assert order.position_of == [0, None, 1, 2]

    def test_delete_last(self, horizontal_segments):
        order = ActiveOrder(horizontal_segments)
        fill(order, [0, 1])
        order.delete(1)
        assert order.ids() == [0]
        assert order.get_next_id(0) is None


class TestSwap:
    """Tests for the adjacent swap."""

    def test_swap_neighbours(self, horizontal_segments):
        order = ActiveOrder(horizontal_segments)
        fill(order, [0, 1, 2, 3])
        order.swap(1, 2)
        assert order.ids() == [0, 2, 1, 3]
        assert order.get_pos(2) == 1
        assert order.get_pos(1) == 2

    def test_swap_requires_neighbours(self, horizontal_segments):
        order = ActiveOrder(horizontal_segments)
        fill(order, [0, 1, 2, 3])
        with pytest.raises(AssertionError):
            order.swap(0, 2)


class TestNeighbours:
    """Tests for neighbour lookups."""

    def test_prev_and_next(self, horizontal_segments):
        order = ActiveOrder(horizontal_segments)
        fill(order, [0, 1, 2])
        assert order.get_prev_id(0) is None
        assert order.get_prev_id(1) == 0
        assert order.get_next_id(1) == 2
        assert order.get_next_id(2) is None

    def test_get_pos_of_inactive_segment(self, horizontal_segments):
        order = ActiveOrder(horizontal_segments)
        with pytest.raises(AssertionError):
            order.get_pos(0)


class TestCheckOrder:
    """Tests for the ordering oracle."""

    def test_sorted_order_passes(self, horizontal_segments):
        order = ActiveOrder(horizontal_segments)
        fill(order, [3, 1, 0, 2])
        order.check_order(Point(50, 0))

    def test_broken_order_detected(self, horizontal_segments):
        order = ActiveOrder(horizontal_segments)
        fill(order, [0, 1, 2])
        order.active[0], order.active[2] = order.active[2], order.active[0]
        with pytest.raises(AssertionError):
            order.check_order(Point(50, 0))
