"""CloudWatch output: one flush cycle from metric records to published batches."""

import logging
from collections.abc import Iterable

from cwmetrics.adapters.async_utils import _run_sync
from cwmetrics.config import CloudWatchOutputConfig
from cwmetrics.core.datums import build_metric_datums
from cwmetrics.core.models import Metric, MetricDatum
from cwmetrics.core.partition import partition_datums
from cwmetrics.core.ports import MetricsPublisherPort
from cwmetrics.errors import PublishError

logger = logging.getLogger(__name__)


class CloudWatchOutput:
    """Converts metric records into datums and publishes them in batches.

    Each write() call is one flush cycle: datums are built for every
    metric, partitioned by the configured batch size and handed to the
    publisher one batch at a time, in order. A failed batch does not stop
    the remaining batches from being published.
    """

    def __init__(
        self,
        config: CloudWatchOutputConfig,
        publisher: MetricsPublisherPort,
    ) -> None:
        """Initialize the output.

        Args:
            config: Namespace, modes and batch size.
            publisher: Adapter implementing MetricsPublisherPort.
        """
        self.config = config
        self.publisher = publisher

    def build_datums(self, metrics: Iterable[Metric]) -> list[MetricDatum]:
        """Build datums for all metrics using the configured modes."""
        datums: list[MetricDatum] = []
        for metric in metrics:
            datums.extend(
                build_metric_datums(
                    metric,
                    build_statistic=self.config.write_statistics,
                    high_resolution=self.config.high_resolution_metrics,
                )
            )
        return datums

    async def write(self, metrics: Iterable[Metric]) -> int:
        """Publish the datums of one flush cycle.

        Args:
            metrics: Metric records collected since the previous flush.

        Returns:
            Number of datums published.

        Raises:
            PublishError: If any batch failed. Raised after every batch has
                been attempted; the last failure is chained as __cause__.
        """
        datums = self.build_datums(metrics)
        batches = partition_datums(self.config.batch_size, datums)
        logger.debug(
            "Flushing %d datums in %d batches to namespace %s",
            len(datums),
            len(batches),
            self.config.namespace,
        )

        published = 0
        failed = 0
        last_error: Exception | None = None
        for index, batch in enumerate(batches):
            try:
                await self.publisher.publish(self.config.namespace, batch)
            except PublishError as err:
                failed += 1
                last_error = err
                logger.error(
                    "Failed to publish batch %d/%d (%d datums): %s",
                    index + 1,
                    len(batches),
                    len(batch),
                    err,
                )
                continue
            published += len(batch)

        if last_error is not None:
            raise PublishError(
                f"{failed} of {len(batches)} batches failed to publish",
                failed_batches=failed,
                total_batches=len(batches),
            ) from last_error
        return published

    def write_sync(self, metrics: Iterable[Metric]) -> int:
        """Synchronous variant of write() for non-async callers."""
        return _run_sync(self.write(metrics))
