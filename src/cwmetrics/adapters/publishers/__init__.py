"""Publisher adapters implementing core ports."""

from cwmetrics.adapters.publishers.cloudwatch import CloudWatchPublisher
from cwmetrics.adapters.publishers.in_memory import InMemoryPublisher

__all__ = [
    "CloudWatchPublisher",
    "InMemoryPublisher",
]
