"""
Sweep events and the priority queue that orders them.

Events are visited left to right: ascending x, then ascending y. At a
single location crossings come first and ends come last, so a segment
beginning where another finishes still meets it in the active order. The queue
suppresses an event identical to the one it returned last, which is how a
crossing discovered independently by both of its neighbours is processed
only once.
"""

import heapq
from enum import IntEnum
from typing import List, Optional, Tuple

from ..core.point import Point
from ..utils.geometry import EPSILON


class EventKind(IntEnum):
    """Event kinds, valued by their rank among events at the same location."""
    INTERSECTION = 0
    START = 1
    END = 2


class Event:
    """
    A location at which the active order changes.

    Attributes:
        kind (EventKind): START, END or INTERSECTION
        point (Point): Where the event happens
        segment_ids (Tuple[int, ...]): One id for START/END, two for
            INTERSECTION
    """

    def __init__(self, kind: EventKind, point: Point, *segment_ids: int):
        self.kind = kind
        self.point = point
        self.segment_ids: Tuple[int, ...] = segment_ids

    @classmethod
    def start(cls, point: Point, segment_id: int) -> 'Event':
        return cls(EventKind.START, point, segment_id)

    @classmethod
    def end(cls, point: Point, segment_id: int) -> 'Event':
        return cls(EventKind.END, point, segment_id)

    @classmethod
    def intersection(cls, point: Point, first_id: int, second_id: int) -> 'Event':
        return cls(EventKind.INTERSECTION, point, first_id, second_id)

    def sort_key(self) -> Tuple[float, float, int]:
        return (self.point.x, self.point.y, int(self.kind))

    def same_as(self, other: Optional['Event'], eps: float = EPSILON) -> bool:
        """
        Test if two events describe the same occurrence.

        Crossings are identified by location alone; starts and ends also
        need to refer to the same segment.
        """
        if other is None or self.kind != other.kind:
            return False
        if not self.point.is_close(other.point, eps):
            return False
        if self.kind is EventKind.INTERSECTION:
            return True
        return self.segment_ids == other.segment_ids

    def __repr__(self) -> str:
        ids = ", ".join(str(i) for i in self.segment_ids)
        return f"{self.kind.name.title()}({self.point}, {ids})"


class EventQueue:
    """
    Min-priority queue of sweep events with duplicate suppression.

    Attributes:
        duplicates_discarded (int): Events dropped by pop() as repeats
    """

    def __init__(self, epsilon: float = EPSILON):
        self._heap: List[Tuple[float, float, int, int, Event]] = []
        self._sequence = 0
        self._last: Optional[Event] = None
        self.epsilon = epsilon
        self.duplicates_discarded = 0

    def push(self, event: Event) -> None:
        """Insert an event unconditionally."""
        x, y, rank = event.sort_key()
        heapq.heappush(self._heap, (x, y, rank, self._sequence, event))
        self._sequence += 1

    def pop(self) -> Optional[Event]:
        """
        Remove and return the next event.

        An event identical to the previously returned one is discarded and
        the queue pops again.

        Returns:
            The next distinct event, or None when the queue is exhausted
        """
        while self._heap:
            event = heapq.heappop(self._heap)[-1]
            if event.same_as(self._last, self.epsilon):
                self.duplicates_discarded += 1
                continue
            self._last = event
            return event
        return None

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
