"""Command-line front end.

Example::

    tandemsim --queues "1,1,0,10,0,5|2,3,0,0,2,4" --random 0.5,0.5,0.2,0.9
    python -m tandemsim --queues "1,5,2,4,3,5" --random-file samples.txt --csv out.csv
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from tandemsim.config import (
    ConfigurationError,
    load_random_numbers,
    parse_queues,
    parse_random_numbers,
)
from tandemsim.core.simulation import DEFAULT_FIRST_ARRIVAL_TIME, Simulation
from tandemsim.logging_config import configure_from_env, enable_console_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tandemsim",
        description="Simulate a tandem network of finite G/G/c/K queues "
        "driven by a fixed list of uniform random numbers",
    )
    parser.add_argument(
        "--queues",
        required=True,
        help="Stages as 'servers,capacity,arrival_min,arrival_max,service_min,service_max|...'",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--random", default=None, help="Comma-separated random numbers in [0, 1)")
    source.add_argument("--random-file", default=None, help="File with random numbers in [0, 1)")
    parser.add_argument(
        "--first-arrival",
        type=float,
        default=DEFAULT_FIRST_ARRIVAL_TIME,
        help="Time of the first external arrival (default: %(default)s)",
    )
    parser.add_argument("--csv", default=None, help="Write per-state statistics to this CSV file")
    parser.add_argument("--plot", default=None, help="Save an occupancy chart to this image file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Enable console logging at this level (otherwise TS_LOGGING is honoured)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        enable_console_logging(level=args.log_level)
    else:
        configure_from_env()

    try:
        stages = parse_queues(args.queues)
        if args.random_file:
            random_numbers = load_random_numbers(args.random_file)
        else:
            random_numbers = parse_random_numbers(args.random)
    except ConfigurationError as e:
        parser.error(str(e))
    except OSError as e:
        parser.error(f"cannot read random numbers: {e}")

    simulation = Simulation(stages, random_numbers, first_arrival_time=args.first_arrival)
    report = simulation.simulate()

    print(report.format_text())

    if args.csv:
        report.to_dataframe().to_csv(args.csv, index=False)
        logger.info("Wrote state statistics to %s", args.csv)
    if args.plot:
        import matplotlib.pyplot as plt

        from tandemsim.visual import plot_occupancy

        fig = plot_occupancy(report, args.plot)
        plt.close(fig)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
