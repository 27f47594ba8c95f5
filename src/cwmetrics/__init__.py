"""cwmetrics: convert tag-and-field metrics into CloudWatch datums."""

import logging

from cwmetrics.adapters.output import CloudWatchOutput
from cwmetrics.adapters.publishers import CloudWatchPublisher, InMemoryPublisher
from cwmetrics.config import DEFAULT_BATCH_SIZE, MAX_BATCH_SIZE, CloudWatchOutputConfig
from cwmetrics.core.datums import build_metric_datums
from cwmetrics.core.dimensions import build_dimensions
from cwmetrics.core.encoding import encode_datum, encode_datums
from cwmetrics.core.metrics import gauge, metric, statistic_fields
from cwmetrics.core.models import (
    HIGH_RESOLUTION,
    MAX_DIMENSIONS,
    STANDARD_RESOLUTION,
    Dimension,
    Metric,
    MetricDatum,
    StatisticSet,
)
from cwmetrics.core.partition import partition_datums
from cwmetrics.core.ports import MetricsPublisherPort
from cwmetrics.errors import CloudWatchMetricsError, PublishError

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_BATCH_SIZE",
    "HIGH_RESOLUTION",
    "MAX_BATCH_SIZE",
    "MAX_DIMENSIONS",
    "STANDARD_RESOLUTION",
    "CloudWatchMetricsError",
    "CloudWatchOutput",
    "CloudWatchOutputConfig",
    "CloudWatchPublisher",
    "Dimension",
    "InMemoryPublisher",
    "Metric",
    "MetricDatum",
    "MetricsPublisherPort",
    "PublishError",
    "StatisticSet",
    "build_dimensions",
    "build_metric_datums",
    "encode_datum",
    "encode_datums",
    "gauge",
    "metric",
    "partition_datums",
    "statistic_fields",
]
