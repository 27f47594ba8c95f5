"""Core domain models for CloudWatch metric conversion."""

from dataclasses import dataclass, field
from typing import Any

# CloudWatch accepts at most this many dimensions per datum
MAX_DIMENSIONS = 10

# Storage resolutions in seconds
STANDARD_RESOLUTION = 60
HIGH_RESOLUTION = 1

FieldValue = bool | int | float | str


@dataclass(frozen=True)
class Metric:
    """A tag-and-field metric record.

    Attributes:
        name: Metric name (e.g., cpu).
        tags: Key-value pairs used as dimensions.
        fields: Named values; only numeric and boolean values are published.
        timestamp: Unix timestamp in seconds.
    """

    name: str
    tags: dict[str, str] = field(default_factory=dict)
    fields: dict[str, Any] = field(default_factory=dict)
    timestamp: float = 0.0


@dataclass(frozen=True)
class Dimension:
    """A CloudWatch dimension name/value pair."""

    name: str
    value: str


@dataclass(frozen=True)
class StatisticSet:
    """Pre-aggregated statistic values for one datum."""

    maximum: float
    minimum: float
    sum: float
    sample_count: float


@dataclass(frozen=True)
class MetricDatum:
    """A single element of a PutMetricData request.

    Carries either a scalar ``value`` or ``statistic_values``, never both.

    Attributes:
        metric_name: Datum name (e.g., cpu_usage_idle).
        timestamp: Unix timestamp in seconds.
        dimensions: At most MAX_DIMENSIONS dimensions.
        storage_resolution: HIGH_RESOLUTION or STANDARD_RESOLUTION.
        value: Scalar value.
        statistic_values: Statistic summary.
    """

    metric_name: str
    timestamp: float
    dimensions: tuple[Dimension, ...] = ()
    storage_resolution: int = STANDARD_RESOLUTION
    value: float | None = None
    statistic_values: StatisticSet | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.statistic_values is None):
            raise ValueError(
                "MetricDatum requires exactly one of value or statistic_values"
            )
        if len(self.dimensions) > MAX_DIMENSIONS:
            raise ValueError(
                f"MetricDatum supports at most {MAX_DIMENSIONS} dimensions, "
                f"got {len(self.dimensions)}"
            )

    @property
    def is_statistic(self) -> bool:
        """Return True if the datum carries a statistic summary."""
        return self.statistic_values is not None
