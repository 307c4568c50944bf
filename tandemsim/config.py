"""Stage configuration records and parsers for command-line input.

The engine assumes validated input. Everything that can be malformed
(field counts, non-numeric values, inverted ranges, samples outside
[0, 1)) is rejected here with a ConfigurationError before a Simulation
is ever constructed.

Stage syntax, one stage per ``|``-separated group::

    servers,capacity,arrival_min,arrival_max,service_min,service_max

Only the first stage keeps its arrival range; later stages receive
customers exclusively from the stage before them.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from pathlib import Path

logger = logging.getLogger(__name__)

STAGE_FIELD_COUNT = 6
STAGE_SEPARATOR = "|"
FIELD_SEPARATOR = ","

Range = tuple[float, float]


class ConfigurationError(ValueError):
    """Raised for malformed stage records or random-number input."""


def _check_range(name: str, value: Range) -> Range:
    low, high = value
    if low > high:
        raise ConfigurationError(f"{name} min must be <= max, got ({low}, {high})")
    return (float(low), float(high))


@dataclass(frozen=True)
class StageConfig:
    """Validated configuration for one stage of the tandem network.

    Attributes:
        servers: Number of parallel servers (> 0).
        capacity: Maximum customers resident, in service plus waiting (>= servers).
        service_range: (min, max) of the uniform service-time distribution.
        arrival_range: (min, max) of the uniform interarrival distribution,
            only meaningful for the first stage.
    """

    servers: int
    capacity: int
    service_range: Range
    arrival_range: Range | None = None

    def __post_init__(self):
        if self.servers <= 0:
            raise ConfigurationError(f"servers must be > 0, got {self.servers}")
        if self.capacity < self.servers:
            raise ConfigurationError(
                f"capacity must be >= servers ({self.servers}), got {self.capacity}"
            )
        object.__setattr__(self, "service_range", _check_range("service_range", self.service_range))
        if self.arrival_range is not None:
            object.__setattr__(self, "arrival_range", _check_range("arrival_range", self.arrival_range))

    def without_arrivals(self) -> StageConfig:
        return replace(self, arrival_range=None)


def _parse_number(raw: str, kind: type, field_name: str):
    try:
        return kind(raw.strip())
    except ValueError:
        raise ConfigurationError(f"Invalid {field_name}: {raw.strip()!r}") from None


def _parse_count(raw: str, field_name: str) -> int:
    # Integral floats such as "2.0" are accepted; "2.5" is not.
    value = _parse_number(raw, float, field_name)
    if not value.is_integer():
        raise ConfigurationError(f"{field_name} must be a whole number, got {raw.strip()!r}")
    return int(value)


def parse_stage(text: str) -> StageConfig:
    """Parse one ``servers,capacity,amin,amax,smin,smax`` record."""
    fields = text.split(FIELD_SEPARATOR)
    if len(fields) != STAGE_FIELD_COUNT:
        raise ConfigurationError(
            "Invalid stage format. Use: "
            "servers,capacity,arrival_min,arrival_max,service_min,service_max "
            f"(got {len(fields)} fields in {text!r})"
        )
    servers = _parse_count(fields[0], "servers")
    capacity = _parse_count(fields[1], "capacity")
    arrival_min, arrival_max, service_min, service_max = (
        _parse_number(raw, float, name)
        for raw, name in zip(
            fields[2:], ("arrival_min", "arrival_max", "service_min", "service_max")
        )
    )
    return StageConfig(
        servers=servers,
        capacity=capacity,
        service_range=(service_min, service_max),
        arrival_range=(arrival_min, arrival_max),
    )


def parse_queues(text: str) -> list[StageConfig]:
    """Parse a ``|``-separated list of stages.

    The arrival range is kept for the first stage only.
    """
    if not text or not text.strip():
        raise ConfigurationError("At least one stage is required")
    stages = [parse_stage(part) for part in text.split(STAGE_SEPARATOR)]
    stages = [stages[0]] + [stage.without_arrivals() for stage in stages[1:]]
    logger.debug("Parsed %d stage(s)", len(stages))
    return stages


def _validate_samples(values: list[float]) -> list[float]:
    for position, value in enumerate(values):
        if not 0.0 <= value < 1.0:
            raise ConfigurationError(
                f"Random number #{position + 1} must be in [0, 1), got {value}"
            )
    return values


def parse_random_numbers(text: str | None) -> list[float]:
    """Parse a comma-separated list of uniform samples. Empty input yields []."""
    if text is None or not text.strip():
        return []
    values = [
        _parse_number(raw, float, "random number")
        for raw in text.split(FIELD_SEPARATOR)
        if raw.strip()
    ]
    return _validate_samples(values)


def load_random_numbers(path: str | Path) -> list[float]:
    """Read samples from a text file.

    Values may be separated by commas, whitespace or newlines. Anything after
    a ``#`` on a line is ignored.
    """
    path = Path(path)
    values: list[float] = []
    with path.open(encoding="utf-8") as handle:
        for line in handle:
            line = line.split("#", 1)[0]
            for raw in re.split(r"[,\s]+", line):
                if raw:
                    values.append(_parse_number(raw, float, "random number"))
    logger.debug("Loaded %d random numbers from %s", len(values), path)
    return _validate_samples(values)
