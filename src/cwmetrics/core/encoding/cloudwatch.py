"""PutMetricData encoder for metric datums."""

from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any

from cwmetrics.core.models import MetricDatum


def encode_datum(datum: MetricDatum) -> dict[str, Any]:
    """Encode a datum as one element of a PutMetricData MetricData list.

    Args:
        datum: The datum to encode.

    Returns:
        Dict in the shape boto3 expects, with either "Value" or
        "StatisticValues".
    """
    obj: dict[str, Any] = {
        "MetricName": datum.metric_name,
        "Dimensions": [
            {"Name": dimension.name, "Value": dimension.value}
            for dimension in datum.dimensions
        ],
        "Timestamp": datetime.fromtimestamp(datum.timestamp, tz=timezone.utc),
        "StorageResolution": datum.storage_resolution,
    }
    if datum.statistic_values is not None:
        stats = datum.statistic_values
        obj["StatisticValues"] = {
            "SampleCount": stats.sample_count,
            "Sum": stats.sum,
            "Minimum": stats.minimum,
            "Maximum": stats.maximum,
        }
    else:
        obj["Value"] = datum.value
    return obj


def encode_datums(datums: Iterable[MetricDatum]) -> list[dict[str, Any]]:
    """Encode datums in order.

    Args:
        datums: An iterable of MetricDatum objects.

    Returns:
        List of encoded datums. Empty list if no datums.
    """
    return [encode_datum(datum) for datum in datums]
