from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

if TYPE_CHECKING:
    from matplotlib.figure import Figure

    from tandemsim.report import SimulationReport

logger = logging.getLogger(__name__)


def plot_occupancy(report: SimulationReport, path: str | Path | None = None) -> Figure:
    """Bar chart of occupancy probabilities, one panel per queue.

    Saves the figure to `path` when given. The figure is returned open so
    callers can adjust it; close it with ``plt.close(fig)`` when done.
    """
    n = max(len(report.queues), 1)
    fig, axes = plt.subplots(1, n, figsize=(5 * n, 4), squeeze=False)

    for ax, q in zip(axes[0], report.queues):
        levels = list(q.states)
        percentages = [stat.percentage for stat in q.states.values()]
        ax.bar(levels, percentages, color="steelblue", alpha=0.8)
        ax.set_xlabel("Customers in queue")
        ax.set_ylabel("Time share (%)")
        ax.set_xticks(levels)
        ax.set_title(f"Queue {q.queue_id + 1} (losses={q.losses})")
        ax.grid(True, alpha=0.2)

    fig.suptitle(f"Occupancy distribution, global time {report.global_time}")
    fig.tight_layout()

    if path is not None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(path, dpi=150)
        logger.info("Saved occupancy chart to %s", path)
    return fig
