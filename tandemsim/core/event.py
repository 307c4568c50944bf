"""Events processed by the tandem simulation.

An event is an immutable (time, kind, queue) triple. Ordering between events
is the scheduler's job (see EventHeap), so Event itself carries no sort
index.
"""

from dataclasses import dataclass
from enum import Enum


class EventType(Enum):
    """Kind of state transition an event triggers."""

    ARRIVAL = "arrival"
    DEPARTURE = "departure"


@dataclass(frozen=True, slots=True)
class Event:
    """A pending arrival or departure at one stage.

    Attributes:
        time: Simulation time at which the event fires.
        event_type: ARRIVAL or DEPARTURE.
        queue_id: Index of the stage the event applies to.
    """

    time: float
    event_type: EventType
    queue_id: int

    @classmethod
    def arrival(cls, time: float, queue_id: int) -> "Event":
        return cls(time, EventType.ARRIVAL, queue_id)

    @classmethod
    def departure(cls, time: float, queue_id: int) -> "Event":
        return cls(time, EventType.DEPARTURE, queue_id)

    def __repr__(self) -> str:
        return f"Event({self.time!r}, {self.event_type.value}, queue={self.queue_id})"
