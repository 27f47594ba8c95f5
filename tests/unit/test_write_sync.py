"""Tests for the synchronous flush bridge."""

from collections.abc import Callable, Sequence

import pytest

from cwmetrics.adapters.output import CloudWatchOutput
from cwmetrics.adapters.publishers.in_memory import InMemoryPublisher
from cwmetrics.config import CloudWatchOutputConfig
from cwmetrics.core.models import Metric, MetricDatum
from cwmetrics.errors import PublishError

pytestmark = [
    pytest.mark.unit,
    pytest.mark.tier(1),
    pytest.mark.tra("Adapter.Output.WriteSync"),
]

MetricFactory = Callable[..., Metric]


class RejectAllPublisher(InMemoryPublisher):
    """Publisher that rejects every batch."""

    async def publish(self, namespace: str, datums: Sequence[MetricDatum]) -> None:
        raise PublishError("rejected")


class TestWriteSync:
    """Tests for CloudWatchOutput.write_sync()."""

    def test_returns_published_datum_count(
        self,
        make_metric: MetricFactory,
        output_config: CloudWatchOutputConfig,
        publisher: InMemoryPublisher,
    ) -> None:
        """write_sync returns how many datums were published."""
        output = CloudWatchOutput(output_config, publisher)

        count = output.write_sync([make_metric(fields={"a": 1, "b": 2, "c": 3})])

        assert count == 3
        assert [len(batch) for _, batch in publisher.requests] == [2, 1]

    def test_publish_error_propagates(
        self, make_metric: MetricFactory, output_config: CloudWatchOutputConfig
    ) -> None:
        """A failed flush raises PublishError to the synchronous caller."""
        output = CloudWatchOutput(output_config, RejectAllPublisher())

        with pytest.raises(PublishError, match="2 of 2 batches failed"):
            output.write_sync([make_metric(fields={"a": 1, "b": 2, "c": 3})])

    @pytest.mark.asyncio
    async def test_inside_running_loop_raises(
        self,
        make_metric: MetricFactory,
        output_config: CloudWatchOutputConfig,
        publisher: InMemoryPublisher,
    ) -> None:
        """write_sync refuses to run inside an event loop and publishes nothing."""
        output = CloudWatchOutput(output_config, publisher)

        with pytest.raises(RuntimeError, match="await write"):
            output.write_sync([make_metric(fields={"a": 1})])

        assert publisher.requests == []
