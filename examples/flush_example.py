"""Example flush loop publishing host metrics to CloudWatch.

Run with:
    CLOUDWATCH_NAMESPACE=Example/Hosts python examples/flush_example.py

Set CLOUDWATCH_DRY_RUN=1 to print datums instead of calling AWS.
Set CLOUDWATCH_ENDPOINT_URL to target a local emulator.
"""

import logging
import os
import random
import socket
import time

from cwmetrics import (
    CloudWatchOutput,
    CloudWatchOutputConfig,
    CloudWatchPublisher,
    InMemoryPublisher,
    gauge,
    metric,
    statistic_fields,
)

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))
logger = logging.getLogger("flush_example")

INTERVAL_SECONDS = 10


def collect() -> list:
    """Collect one interval of sample metrics."""
    host = socket.gethostname()
    latencies = [random.uniform(0.005, 0.5) for _ in range(50)]
    return [
        metric(
            "cpu",
            {"usage_idle": random.uniform(50, 100), "throttled": False},
            tags={"host": host, "cpu": "cpu-total"},
        ),
        metric(
            "http",
            statistic_fields(
                "latency",
                max(latencies),
                min(latencies),
                sum(latencies),
                len(latencies),
            ),
            tags={"host": host, "route": "/api"},
        ),
        gauge("queue_depth", random.randint(0, 20), tags={"host": host}),
    ]


def main() -> None:
    config = CloudWatchOutputConfig.from_env()
    dry_run = os.getenv("CLOUDWATCH_DRY_RUN", "") == "1"
    if dry_run:
        publisher = InMemoryPublisher()
    else:
        publisher = CloudWatchPublisher.from_config(config)
    output = CloudWatchOutput(config, publisher)

    while True:
        count = output.write_sync(collect())
        logger.info("Published %d datums to %s", count, config.namespace)
        if isinstance(publisher, InMemoryPublisher):
            for datum in publisher.datums:
                logger.info("%s", datum)
            publisher.clear()
        time.sleep(INTERVAL_SECONDS)


if __name__ == "__main__":
    main()
