"""Discrete-event engine for a tandem network of finite queues.

Customers arrive externally at stage 0 only. A customer finishing service at
stage i moves instantly to stage i + 1, or leaves the network after the last
stage. A stage that is full when a customer arrives counts a loss.

The run is a pure function of the stage configuration and the random
sequence. Samples are drawn in the chronological order the transitions
request them:

    Arrival at a stage with a free server   -> one service sample
    Arrival at stage 0 (after the above)    -> one interarrival sample
    Departure with a customer waiting       -> one service sample
    Transfer into a stage with a free server -> one service sample

The run halts when no events remain or when a draw finds the random stream
empty. Both are normal completions and leave a reportable state.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Iterable, Sequence
from enum import Enum

from tandemsim.config import StageConfig
from tandemsim.core.event import Event, EventType
from tandemsim.core.event_heap import EmptySchedulerError, EventHeap
from tandemsim.core.queue_state import QueueState
from tandemsim.core.random_stream import RandomStream, RandomStreamExhausted
from tandemsim.report import TIME_DECIMALS, SimulationReport, build_report, round_half_up

logger = logging.getLogger(__name__)

DEFAULT_FIRST_ARRIVAL_TIME = 1.5

EventHook = Callable[["Simulation", Event], None]
"""Signature for observers called after each event is applied."""


class SimulationStatus(Enum):
    """Lifecycle of a Simulation. HALTED is terminal."""

    IDLE = "idle"
    RUNNING = "running"
    HALTED = "halted"


class HaltReason(Enum):
    """Why the run loop stopped."""

    SCHEDULER_EMPTY = "scheduler_empty"
    RANDOM_EXHAUSTED = "random_exhausted"


class Simulation:
    """Runs one tandem-network simulation.

    Args:
        stages: Stage configurations in chain order. Only stage 0 may carry
            an arrival range.
        random_numbers: Uniform samples in [0, 1), or a RandomStream.
        first_arrival_time: Time of the first external arrival.
        on_event: Optional hook called after every applied event.

    Attributes:
        current_time: Simulation clock, advanced to each event's time.
        events_processed: Number of events popped and applied.
        status: IDLE before simulate(), HALTED after.
        halt_reason: Set once the run halts.
    """

    def __init__(
        self,
        stages: Sequence[StageConfig],
        random_numbers: Iterable[float] | RandomStream = (),
        *,
        first_arrival_time: float = DEFAULT_FIRST_ARRIVAL_TIME,
        on_event: EventHook | None = None,
    ):
        if not stages:
            raise ValueError("Simulation requires at least one stage")
        self._queues = [QueueState.from_config(stage) for stage in stages]
        if isinstance(random_numbers, RandomStream):
            self._random = random_numbers
        else:
            self._random = RandomStream(random_numbers)
        self._scheduler = EventHeap()
        self._first_arrival_time = first_arrival_time
        self._on_event = on_event

        self.current_time = 0.0
        self.events_processed = 0
        self.status = SimulationStatus.IDLE
        self.halt_reason: HaltReason | None = None

    @property
    def queues(self) -> tuple[QueueState, ...]:
        """Snapshots of every stage. Changing them does not affect the run."""
        return tuple(copy.deepcopy(queue) for queue in self._queues)

    @property
    def random_stream(self) -> RandomStream:
        return self._random

    @property
    def pending_events(self) -> int:
        return self._scheduler.size()

    @property
    def global_time(self) -> float:
        return round_half_up(self.current_time, TIME_DECIMALS)

    def simulate(self) -> SimulationReport:
        """Run until the scheduler empties or the random stream runs out."""
        if self.status is not SimulationStatus.IDLE:
            raise RuntimeError(f"simulate() already called (status={self.status.value})")

        self.status = SimulationStatus.RUNNING
        logger.info(
            "Simulation started: %d stage(s), %d random numbers",
            len(self._queues), len(self._random),
        )

        if self._queues[0].is_external_source:
            self._scheduler.push(Event.arrival(self._first_arrival_time, 0))

        while self.status is SimulationStatus.RUNNING:
            try:
                event = self._scheduler.pop()
            except EmptySchedulerError:
                self._halt(HaltReason.SCHEDULER_EMPTY)
                break

            self._advance_clock(event.time)
            self.events_processed += 1
            logger.debug("t=%.4f processing %r", self.current_time, event)

            try:
                if event.event_type is EventType.ARRIVAL:
                    self._process_arrival(event.queue_id)
                else:
                    self._process_departure(event.queue_id)
            except RandomStreamExhausted:
                self._halt(HaltReason.RANDOM_EXHAUSTED)

            if self._on_event is not None:
                self._on_event(self, event)

        return self.report()

    def report(self) -> SimulationReport:
        return build_report(self._queues, self.current_time)

    def _halt(self, reason: HaltReason) -> None:
        self.status = SimulationStatus.HALTED
        self.halt_reason = reason
        logger.info(
            "Simulation halted at t=%.4f (%s) after %d events, %d samples used",
            self.current_time, reason.value, self.events_processed, self._random.index,
        )

    def _advance_clock(self, event_time: float) -> None:
        # Elapsed time belongs to each stage's occupancy before the event.
        delta = event_time - self.current_time
        for queue in self._queues:
            queue.charge(delta)
        self.current_time = event_time

    def _start_service(self, queue_id: int) -> None:
        queue = self._queues[queue_id]
        service_time = self._random.uniform(*queue.service_range)
        departure_time = self.current_time + service_time
        queue.begin_service(departure_time)
        self._scheduler.push(Event.departure(departure_time, queue_id))

    def _admit(self, queue_id: int) -> bool:
        queue = self._queues[queue_id]
        if not queue.admit():
            logger.debug("t=%.4f queue %d full, loss #%d", self.current_time, queue_id, queue.losses)
            return False
        if queue.has_free_server:
            self._start_service(queue_id)
        return True

    def _process_arrival(self, queue_id: int) -> None:
        if not self._admit(queue_id):
            return
        queue = self._queues[queue_id]
        if queue_id == 0 and queue.is_external_source:
            interarrival = self._random.uniform(*queue.arrival_range)
            self._scheduler.push(Event.arrival(self.current_time + interarrival, 0))

    def _process_departure(self, queue_id: int) -> None:
        queue = self._queues[queue_id]
        queue.complete_service()
        if queue.has_waiting_customer:
            self._start_service(queue_id)
        if queue_id < len(self._queues) - 1:
            self._transfer(queue_id + 1)

    def _transfer(self, target_id: int) -> None:
        # Zero transit time; the target samples its own service time.
        self._admit(target_id)
