"""Shared test fixtures for all test modules."""

from collections.abc import Callable
from typing import Any

import pytest

from cwmetrics.adapters.publishers.in_memory import InMemoryPublisher
from cwmetrics.config import CloudWatchOutputConfig
from cwmetrics.core.models import Metric, MetricDatum

# 2009-11-10T23:00:00Z
FIXED_TIMESTAMP = 1257894000.0


@pytest.fixture
def fixed_timestamp() -> float:
    """Provide a stable timestamp for metric records."""
    return FIXED_TIMESTAMP


@pytest.fixture
def make_metric() -> Callable[..., Metric]:
    """Factory fixture for creating Metric records.

    Defaults mirror a single-tag, single-field record so tests only spell
    out what they care about.
    """

    def _metric(
        fields: dict[str, Any] | None = None,
        tags: dict[str, str] | None = None,
        name: str = "test1",
        timestamp: float = FIXED_TIMESTAMP,
    ) -> Metric:
        return Metric(
            name=name,
            tags={"tag1": "value1"} if tags is None else tags,
            fields={"value": 1.0} if fields is None else fields,
            timestamp=timestamp,
        )

    return _metric


@pytest.fixture
def test_datum() -> MetricDatum:
    """A minimal scalar datum."""
    return MetricDatum(metric_name="Foo", timestamp=FIXED_TIMESTAMP, value=1.0)


@pytest.fixture
def publisher() -> InMemoryPublisher:
    """Fresh in-memory publisher."""
    return InMemoryPublisher()


@pytest.fixture
def output_config() -> CloudWatchOutputConfig:
    """Config with a small batch size so batching is easy to observe."""
    return CloudWatchOutputConfig(namespace="Test/Namespace", batch_size=2)
