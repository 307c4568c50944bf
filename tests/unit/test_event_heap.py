"""Unit tests for Event and EventHeap ordering."""

import dataclasses

import pytest

from tandemsim.core.event import Event, EventType
from tandemsim.core.event_heap import EmptySchedulerError, EventHeap


class TestEvent:
    def test_factories(self):
        arrival = Event.arrival(1.5, 0)
        departure = Event.departure(4.0, 2)

        assert arrival.event_type is EventType.ARRIVAL
        assert departure.event_type is EventType.DEPARTURE
        assert departure.queue_id == 2

    def test_is_immutable(self):
        event = Event.arrival(1.5, 0)

        with pytest.raises(dataclasses.FrozenInstanceError):
            event.time = 2.0


class TestEventHeap:
    def test_pops_in_time_order(self):
        heap = EventHeap()
        heap.push(Event.arrival(3.0, 0))
        heap.push(Event.departure(1.0, 0))
        heap.push(Event.arrival(2.0, 1))

        assert [heap.pop().time for _ in range(3)] == [1.0, 2.0, 3.0]

    def test_same_time_events_leave_in_insertion_order(self):
        heap = EventHeap()
        first = Event.departure(2.5, 0)
        second = Event.arrival(2.5, 0)
        third = Event.departure(2.5, 1)
        heap.push(first)
        heap.push(Event.arrival(1.0, 0))
        heap.push(second)
        heap.push(third)

        heap.pop()
        assert heap.pop() is first
        assert heap.pop() is second
        assert heap.pop() is third

    def test_insertion_order_wins_over_event_fields(self):
        # An arrival pushed before a departure at the same time pops first.
        heap = EventHeap()
        heap.push(Event.arrival(5.0, 3))
        heap.push(Event.departure(5.0, 0))

        assert heap.pop().event_type is EventType.ARRIVAL

    def test_push_list(self):
        heap = EventHeap()
        heap.push([Event.arrival(2.0, 0), Event.arrival(2.0, 1)])

        assert heap.size() == 2
        assert heap.pop().queue_id == 0

    def test_initial_events_keep_order(self):
        heap = EventHeap([Event.arrival(1.0, 1), Event.arrival(1.0, 0)])

        assert heap.peek().queue_id == 1
        assert len(heap) == 2

    def test_pop_empty_raises(self):
        heap = EventHeap()

        assert not heap.has_events()
        with pytest.raises(EmptySchedulerError):
            heap.pop()
        with pytest.raises(EmptySchedulerError):
            heap.peek()

    def test_heaps_do_not_share_sequence(self):
        a = EventHeap()
        b = EventHeap()
        a.push(Event.arrival(1.0, 0))
        b.push(Event.arrival(1.0, 7))
        b.push(Event.arrival(1.0, 8))

        assert b.pop().queue_id == 7
