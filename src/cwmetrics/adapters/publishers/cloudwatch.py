"""boto3 publisher adapter for CloudWatch PutMetricData."""

import asyncio
import logging
from collections.abc import Sequence
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from cwmetrics.config import CloudWatchOutputConfig
from cwmetrics.core.encoding.cloudwatch import encode_datums
from cwmetrics.core.models import MetricDatum
from cwmetrics.errors import PublishError

logger = logging.getLogger(__name__)


class CloudWatchPublisher:
    """CloudWatch implementation of MetricsPublisherPort.

    Sends each batch as one PutMetricData request. The blocking boto3 call
    runs in a worker thread so publish() does not block the event loop.

    Example:
        ```python
        publisher = CloudWatchPublisher.from_config(config)
        await publisher.publish("MyApp", datums)
        ```
    """

    def __init__(self, client: Any) -> None:
        """Initialize the publisher with a boto3 CloudWatch client.

        Args:
            client: Client returned by boto3.client("cloudwatch"), or any
                object with a compatible put_metric_data method.
        """
        self._client = client

    @classmethod
    def from_config(cls, config: CloudWatchOutputConfig) -> "CloudWatchPublisher":
        """Create a publisher with a client built from config."""
        client = boto3.client(
            "cloudwatch",
            region_name=config.region_name,
            endpoint_url=config.endpoint_url,
        )
        return cls(client)

    async def publish(self, namespace: str, datums: Sequence[MetricDatum]) -> None:
        """Send one batch of datums.

        Args:
            namespace: CloudWatch namespace.
            datums: Datums for a single request. Empty batches are not sent.

        Raises:
            PublishError: If boto3 reports a client or service error.
        """
        if not datums:
            return
        metric_data = encode_datums(datums)
        logger.debug(
            "PutMetricData namespace=%s datums=%d", namespace, len(metric_data)
        )
        try:
            await asyncio.to_thread(
                self._client.put_metric_data,
                Namespace=namespace,
                MetricData=metric_data,
            )
        except (BotoCoreError, ClientError) as err:
            raise PublishError(
                f"PutMetricData failed for {len(metric_data)} datums "
                f"in namespace {namespace!r}: {err}"
            ) from err
