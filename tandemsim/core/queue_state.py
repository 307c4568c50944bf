"""Mutable per-stage record updated by the simulation engine."""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field

from tandemsim.config import Range, StageConfig


@dataclass
class QueueState:
    """State of one finite-capacity, multi-server stage.

    Invariants maintained by the engine:
        0 <= current_customers <= capacity
        len(in_service) <= min(servers, current_customers)
        sum(state_durations.values()) == elapsed simulation time

    Attributes:
        servers: Maximum customers in service at once.
        capacity: Maximum customers resident (in service plus waiting).
        service_range: (min, max) of the uniform service time.
        arrival_range: (min, max) of the uniform interarrival time, first stage only.
        current_customers: Customers currently resident.
        in_service: Scheduled departure times, sorted ascending.
        state_durations: Time accumulated at each occupancy level visited.
        losses: Admissions rejected because the stage was full.
    """

    servers: int
    capacity: int
    service_range: Range
    arrival_range: Range | None = None

    current_customers: int = field(default=0, init=False)
    in_service: list[float] = field(default_factory=list, init=False)
    state_durations: dict[int, float] = field(default_factory=dict, init=False)
    losses: int = field(default=0, init=False)

    @classmethod
    def from_config(cls, config: StageConfig) -> QueueState:
        return cls(
            servers=config.servers,
            capacity=config.capacity,
            service_range=config.service_range,
            arrival_range=config.arrival_range,
        )

    @property
    def is_full(self) -> bool:
        return self.current_customers >= self.capacity

    @property
    def has_free_server(self) -> bool:
        return len(self.in_service) < self.servers

    @property
    def has_waiting_customer(self) -> bool:
        return self.current_customers >= self.servers

    @property
    def is_external_source(self) -> bool:
        return self.arrival_range is not None

    @property
    def total_time(self) -> float:
        return sum(self.state_durations.values())

    def charge(self, delta: float) -> None:
        """Credit `delta` time units to the current occupancy level."""
        level = self.current_customers
        self.state_durations[level] = self.state_durations.get(level, 0.0) + delta

    def admit(self) -> bool:
        """Try to add one customer. A full stage counts a loss instead."""
        if self.is_full:
            self.losses += 1
            return False
        self.current_customers += 1
        return True

    def begin_service(self, departure_time: float) -> None:
        bisect.insort(self.in_service, departure_time)

    def complete_service(self) -> float:
        """Remove the earliest scheduled departure and the customer it belongs to."""
        departure_time = self.in_service.pop(0)
        self.current_customers -= 1
        return departure_time
