"""Conversion of metric records into CloudWatch datums."""

from cwmetrics.core.dimensions import build_dimensions
from cwmetrics.core.models import (
    HIGH_RESOLUTION,
    STANDARD_RESOLUTION,
    Metric,
    MetricDatum,
)
from cwmetrics.core.statistics import GroupedField, group_fields
from cwmetrics.core.values import to_datum_value


def _datum_name(metric_name: str, field_name: str) -> str:
    return f"{metric_name}_{field_name}"


def build_metric_datums(
    metric: Metric,
    build_statistic: bool = False,
    high_resolution: bool = False,
) -> list[MetricDatum]:
    """Build the datums for one metric record.

    Fields whose values cannot be published (text, NaN, infinities,
    out-of-range numbers) are dropped without error.

    Args:
        metric: The metric record to convert.
        build_statistic: Interpret _max/_min/_sum/_count fields as
            statistic sets.
        high_resolution: Tag datums with 1 second storage resolution
            instead of 60.

    Returns:
        Zero or more MetricDatum objects sharing the metric's dimensions
        and timestamp.
    """
    values: dict[str, float] = {}
    for field_name, raw in metric.fields.items():
        converted = to_datum_value(raw)
        if converted is not None:
            values[field_name] = converted

    if build_statistic:
        grouped = group_fields(values)
    else:
        grouped = [
            GroupedField(name=name, value=values[name]) for name in sorted(values)
        ]

    resolution = HIGH_RESOLUTION if high_resolution else STANDARD_RESOLUTION
    dimensions = tuple(build_dimensions(metric.tags))

    return [
        MetricDatum(
            metric_name=_datum_name(metric.name, entry.name),
            timestamp=metric.timestamp,
            dimensions=dimensions,
            storage_resolution=resolution,
            value=entry.value,
            statistic_values=entry.statistic_values,
        )
        for entry in grouped
    ]
