"""Exceptions raised by cwmetrics adapters."""


class CloudWatchMetricsError(Exception):
    """Base class for cwmetrics errors."""


class PublishError(CloudWatchMetricsError):
    """Raised when one or more batches could not be published.

    Attributes:
        failed_batches: Number of batches that failed.
        total_batches: Number of batches attempted.
    """

    def __init__(
        self, message: str, failed_batches: int = 1, total_batches: int = 1
    ) -> None:
        super().__init__(message)
        self.failed_batches = failed_batches
        self.total_batches = total_batches
