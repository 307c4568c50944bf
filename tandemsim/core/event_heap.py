import heapq
from itertools import count
from typing import Union

from tandemsim.core.event import Event


class EmptySchedulerError(IndexError):
    """Raised when popping from an empty EventHeap."""


class EventHeap:
    def __init__(self, events: list[Event] | None = None):
        """Time-ordered store of pending events.

        Entries are kept as (time, sequence, event) tuples. The sequence
        number comes from a counter owned by this heap, so events sharing a
        timestamp leave in the order they were pushed (FIFO). Departure and
        transfer times can coincide exactly, so this tie-break is what keeps
        a run reproducible.
        """
        self._heap: list[tuple[float, int, Event]] = []
        self._sequence = count()
        if events:
            self.push(list(events))

    def push(self, events: Union[Event, list[Event]]):
        """Push an Event or a list of Events onto the heap."""
        if isinstance(events, list):
            for event in events:
                heapq.heappush(self._heap, (event.time, next(self._sequence), event))
        else:
            heapq.heappush(self._heap, (events.time, next(self._sequence), events))

    def pop(self) -> Event:
        if not self._heap:
            raise EmptySchedulerError("No pending events")
        return heapq.heappop(self._heap)[2]

    def peek(self) -> Event:
        if not self._heap:
            raise EmptySchedulerError("No pending events")
        return self._heap[0][2]

    def has_events(self) -> bool:
        return bool(self._heap)

    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)
