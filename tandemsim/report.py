"""Read-only summary of a finished (or halted) simulation.

For every stage the report lists the time accumulated at each occupancy
level and that level's share of the stage's tracked time, together with the
loss count. Times are rounded to 4 decimals and percentages to 2, with
halves rounded away from zero on the shortest decimal form of the value.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Any

import pandas as pd

if TYPE_CHECKING:
    from tandemsim.core.queue_state import QueueState

TIME_DECIMALS = 4
PERCENT_DECIMALS = 2


def round_half_up(value: float, decimals: int) -> float:
    """Round `value` to `decimals` places, halves away from zero.

    Works on repr(value), so 1.03125 becomes 1.0313 at 4 places where the
    built-in round() would give 1.0312.
    """
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class StateStat:
    """Accumulated time at one occupancy level and its share of the total."""
    time: float
    percentage: float


@dataclass(frozen=True)
class QueueReport:
    """Per-stage statistics. `states` is keyed by occupancy level, ascending."""
    queue_id: int
    states: dict[int, StateStat]
    losses: int
    total_time: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "states": {
                level: {"time": stat.time, "percentage": stat.percentage}
                for level, stat in self.states.items()
            },
            "losses": self.losses,
            "total_time": self.total_time,
        }


@dataclass(frozen=True)
class SimulationReport:
    """Statistics for every stage plus the global simulation time."""
    global_time: float
    queues: list[QueueReport] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "global_time": self.global_time,
            "queues": {q.queue_id: q.to_dict() for q in self.queues},
        }

    def to_dataframe(self) -> pd.DataFrame:
        """One row per (queue, occupancy level)."""
        rows = [
            {
                "queue": q.queue_id + 1,
                "state": level,
                "time": stat.time,
                "percentage": stat.percentage,
                "losses": q.losses,
            }
            for q in self.queues
            for level, stat in q.states.items()
        ]
        return pd.DataFrame(rows, columns=["queue", "state", "time", "percentage", "losses"])

    def format_text(self) -> str:
        lines = ["===== SIMULATION REPORT =====", ""]
        for q in self.queues:
            lines.append(f"Queue {q.queue_id + 1}")
            lines.append("State | Accumulated time | Probability")
            for level, stat in q.states.items():
                lines.append(
                    f"{str(level).center(6)}| "
                    f"{f'{stat.time:.4f}'.center(17)}| "
                    f"{f'{stat.percentage:.2f}%'.center(12)}"
                )
            lines.append("")
            lines.append(f"Lost customers: {q.losses}")
            lines.append(f"Queue accumulated time: {q.total_time}")
            lines.append("")
        lines.append(f"Global simulation time: {self.global_time}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.format_text()


def _queue_report(queue_id: int, queue: QueueState) -> QueueReport:
    total = queue.total_time
    states = {}
    for level in sorted(queue.state_durations):
        time = queue.state_durations[level]
        percentage = round_half_up(time / total * 100, PERCENT_DECIMALS) if total > 0 else 0.0
        states[level] = StateStat(time=round_half_up(time, TIME_DECIMALS), percentage=percentage)
    return QueueReport(
        queue_id=queue_id,
        states=states,
        losses=queue.losses,
        total_time=round_half_up(total, TIME_DECIMALS),
    )


def build_report(queues: Sequence[QueueState], current_time: float) -> SimulationReport:
    """Derive a report from final queue states without modifying them."""
    return SimulationReport(
        global_time=round_half_up(current_time, TIME_DECIMALS),
        queues=[_queue_report(queue_id, queue) for queue_id, queue in enumerate(queues)],
    )
