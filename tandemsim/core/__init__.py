"""Core simulation engine components."""

from tandemsim.core.event import Event, EventType
from tandemsim.core.event_heap import EmptySchedulerError, EventHeap
from tandemsim.core.queue_state import QueueState
from tandemsim.core.random_stream import RandomStream, RandomStreamExhausted
from tandemsim.core.simulation import (
    DEFAULT_FIRST_ARRIVAL_TIME,
    HaltReason,
    Simulation,
    SimulationStatus,
)

__all__ = [
    "DEFAULT_FIRST_ARRIVAL_TIME",
    "EmptySchedulerError",
    "Event",
    "EventHeap",
    "EventType",
    "HaltReason",
    "QueueState",
    "RandomStream",
    "RandomStreamExhausted",
    "Simulation",
    "SimulationStatus",
]
