"""tandemsim: discrete-event simulator for tandem networks of finite queues.

Logging is silent by default. Enable it with the helpers re-exported from
tandemsim.logging_config, e.g. ``tandemsim.enable_console_logging("DEBUG")``.
"""

import logging

logging.getLogger("tandemsim").addHandler(logging.NullHandler())

from tandemsim.config import (
    ConfigurationError,
    StageConfig,
    load_random_numbers,
    parse_queues,
    parse_random_numbers,
    parse_stage,
)
from tandemsim.core import (
    EmptySchedulerError,
    Event,
    EventHeap,
    EventType,
    HaltReason,
    QueueState,
    RandomStream,
    RandomStreamExhausted,
    Simulation,
    SimulationStatus,
)
from tandemsim.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_file_logging,
    enable_json_logging,
    set_level,
)
from tandemsim.report import QueueReport, SimulationReport, StateStat, build_report

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "EmptySchedulerError",
    "Event",
    "EventHeap",
    "EventType",
    "HaltReason",
    "QueueReport",
    "QueueState",
    "RandomStream",
    "RandomStreamExhausted",
    "Simulation",
    "SimulationReport",
    "SimulationStatus",
    "StageConfig",
    "StateStat",
    "build_report",
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_file_logging",
    "enable_json_logging",
    "load_random_numbers",
    "parse_queues",
    "parse_random_numbers",
    "parse_stage",
    "set_level",
]
