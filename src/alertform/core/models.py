"""Core domain models for alert rule editing."""

from dataclasses import dataclass, field
from enum import Enum

from alertform.core.promql import Comparator, Labels


@dataclass(frozen=True)
class LogEntry:
    """A structured log entry.

    Attributes:
        timestamp: Unix timestamp in seconds.
        level: Log level (e.g., INFO, WARN, DEBUG).
        message: The log message.
        attributes: Additional structured fields.
    """

    timestamp: float
    level: str
    message: str
    attributes: dict[str, str | int | float | bool] = field(default_factory=dict)


class TimeUnit(str, Enum):
    """Units a rule's ``for`` duration can be edited in."""

    HOURS = "h"
    MINUTES = "m"
    SECONDS = "s"

    @property
    def label(self) -> str:
        """Human readable name shown next to the duration input."""
        return _TIME_UNIT_LABELS[self]


_TIME_UNIT_LABELS = {
    TimeUnit.HOURS: "hours",
    TimeUnit.MINUTES: "minutes",
    TimeUnit.SECONDS: "seconds",
}


@dataclass(frozen=True)
class Duration:
    """A duration split into whole hours, minutes and seconds.

    No upper bound is enforced on any field: ``Duration(minutes=90)`` is
    kept as is rather than normalised into hours.
    """

    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    def __post_init__(self) -> None:
        for name in ("hours", "minutes", "seconds"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")


@dataclass(frozen=True)
class MostSignificantTime:
    """The largest nonzero unit of a Duration and its magnitude.

    Attributes:
        magnitude: Value of the selected unit.
        unit: The selected unit.
    """

    magnitude: int
    unit: TimeUnit


@dataclass(frozen=True)
class ThresholdExpression:
    """Simplified alert condition of the form ``metric{filters} <op> value``.

    Attributes:
        metric_name: Name of the selected metric.
        filters: Label matchers on the metric, never containing the
            reserved network label.
        comparator: Relational operator of the condition.
        value: Scalar the metric is compared against.
    """

    metric_name: str
    comparator: Comparator
    value: float
    filters: Labels = field(default_factory=Labels)
