"""Port interfaces for publishing adapters.

These protocols define the contracts that publisher adapters must implement.
The core domain depends only on these interfaces, not concrete implementations.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from cwmetrics.core.models import MetricDatum


@runtime_checkable
class MetricsPublisherPort(Protocol):
    """Port for submitting datum batches.

    Adapters implementing this protocol send one batch per call.
    Examples: InMemoryPublisher, CloudWatchPublisher.
    """

    async def publish(self, namespace: str, datums: Sequence[MetricDatum]) -> None:
        """Publish one batch of datums under the given namespace.

        Args:
            namespace: CloudWatch namespace (e.g., "Telegraf/Hosts").
            datums: At most one request's worth of datums.

        Raises:
            PublishError: If the batch could not be delivered. Adapters must
                translate transport failures into PublishError so a flush
                can move on to its remaining batches; any other exception
                aborts the flush.
        """
        ...
