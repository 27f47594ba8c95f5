"""In-memory publisher adapter."""

from collections.abc import Sequence

from cwmetrics.core.models import MetricDatum


class InMemoryPublisher:
    """In-memory implementation of MetricsPublisherPort.

    Records every published batch in a list. Suitable for testing and
    dry runs where nothing should leave the process.
    """

    def __init__(self) -> None:
        self._requests: list[tuple[str, list[MetricDatum]]] = []

    async def publish(self, namespace: str, datums: Sequence[MetricDatum]) -> None:
        """Record one batch of datums."""
        self._requests.append((namespace, list(datums)))

    @property
    def requests(self) -> list[tuple[str, list[MetricDatum]]]:
        """Published (namespace, batch) pairs in publish order."""
        return list(self._requests)

    @property
    def datums(self) -> list[MetricDatum]:
        """All published datums in publish order."""
        return [datum for _, batch in self._requests for datum in batch]

    def clear(self) -> None:
        """Forget all recorded requests."""
        self._requests.clear()
