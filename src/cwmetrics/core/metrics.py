"""Metric helper functions for creating Metric records."""

import time
from typing import Any

from cwmetrics.core.models import Metric
from cwmetrics.core.statistics import StatisticType


def metric(
    name: str,
    fields: dict[str, Any],
    tags: dict[str, str] | None = None,
    timestamp: float | None = None,
) -> Metric:
    """Create a metric record.

    Args:
        name: Metric name (e.g., "cpu")
        fields: Field values keyed by field name
        tags: Optional tags, published as dimensions
        timestamp: Unix timestamp in seconds (default: current time)

    Returns:
        Metric with the given or current timestamp
    """
    return Metric(
        name=name,
        tags=tags or {},
        fields=dict(fields),
        timestamp=time.time() if timestamp is None else timestamp,
    )


def gauge(
    name: str,
    value: float,
    tags: dict[str, str] | None = None,
) -> Metric:
    """Create a single-field metric record.

    Args:
        name: Metric name (e.g., "queue_depth")
        value: Current value, stored in the "value" field
        tags: Optional tags, published as dimensions

    Returns:
        Metric with current timestamp
    """
    return metric(name, {"value": value}, tags=tags)


def statistic_fields(
    prefix: str,
    maximum: float,
    minimum: float,
    total: float,
    count: float,
) -> dict[str, float]:
    """Lay out already-aggregated values as suffixed statistic fields.

    Args:
        prefix: Field prefix (e.g., "latency")
        maximum: Largest observed value
        minimum: Smallest observed value
        total: Sum of observed values
        count: Number of observations

    Returns:
        Fields such as {"latency_max": ..., "latency_count": ...}
    """
    return {
        f"{prefix}_{StatisticType.MAX.value}": maximum,
        f"{prefix}_{StatisticType.MIN.value}": minimum,
        f"{prefix}_{StatisticType.SUM.value}": total,
        f"{prefix}_{StatisticType.COUNT.value}": count,
    }
