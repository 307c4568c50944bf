"""Charts for simulation reports.

Usage::

    from tandemsim.visual import plot_occupancy

    report = Simulation(stages, samples).simulate()
    plot_occupancy(report, "occupancy.png")
"""

from tandemsim.visual.plots import plot_occupancy

__all__ = ["plot_occupancy"]
