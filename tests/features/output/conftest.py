"""BDD step definitions for CloudWatch output flush scenarios."""

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

import pytest
from pytest_bdd import given, parsers, then, when

from cwmetrics.adapters.output import CloudWatchOutput
from cwmetrics.adapters.publishers.in_memory import InMemoryPublisher
from cwmetrics.config import CloudWatchOutputConfig
from cwmetrics.core.models import Metric, MetricDatum
from cwmetrics.errors import PublishError


class RejectingPublisher(InMemoryPublisher):
    """In-memory publisher that rejects selected requests (1-based)."""

    def __init__(self, rejected: set[int]) -> None:
        super().__init__()
        self._rejected = rejected
        self._calls = 0

    async def publish(self, namespace: str, datums: Sequence[MetricDatum]) -> None:
        self._calls += 1
        if self._calls in self._rejected:
            raise PublishError(f"request {self._calls} rejected")
        await super().publish(namespace, datums)


@dataclass
class FlushScenarioContext:
    """Shared state between steps in a flush scenario."""

    publisher: InMemoryPublisher = field(default_factory=InMemoryPublisher)
    output: CloudWatchOutput | None = None
    exception_raised: Exception | None = None


@pytest.fixture
def ctx() -> FlushScenarioContext:
    """Fresh scenario context for each test."""
    return FlushScenarioContext()


def _parse_value(raw: str) -> Any:
    for convert in (int, float):
        try:
            return convert(raw)
        except ValueError:
            continue
    return raw


def _parse_fields(text: str) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    for pair in text.split(","):
        key, _, raw = pair.strip().partition("=")
        fields[key] = _parse_value(raw)
    return fields


def _split_list(text: str) -> list[str]:
    return [item.strip() for item in text.split(",") if item.strip()]


def _make_output(ctx: FlushScenarioContext, batch_size: int, **options: Any) -> None:
    config = CloudWatchOutputConfig(
        namespace="Test/Namespace", batch_size=batch_size, **options
    )
    ctx.output = CloudWatchOutput(config, ctx.publisher)


# === Background Steps ===
@given("an in-memory publisher")
def step_in_memory_publisher(ctx: FlushScenarioContext) -> None:
    ctx.publisher = InMemoryPublisher()


# === Output Steps ===
@given(parsers.parse("an output with batch size {size:d}"))
def step_output(ctx: FlushScenarioContext, size: int) -> None:
    _make_output(ctx, size)


@given(parsers.parse("an output with batch size {size:d} and statistics enabled"))
def step_output_with_statistics(ctx: FlushScenarioContext, size: int) -> None:
    _make_output(ctx, size, write_statistics=True)


@given(
    parsers.parse(
        "an output with batch size {size:d} whose publisher rejects request {n:d}"
    )
)
def step_output_rejecting(ctx: FlushScenarioContext, size: int, n: int) -> None:
    ctx.publisher = RejectingPublisher(rejected={n})
    _make_output(ctx, size)


@when(parsers.parse('a metric with fields "{fields}" is written'))
def step_write_metric(ctx: FlushScenarioContext, fields: str) -> None:
    assert ctx.output is not None
    metric = Metric(
        name="test1",
        tags={"host": "example.org"},
        fields=_parse_fields(fields),
        timestamp=1257894000.0,
    )
    try:
        asyncio.run(ctx.output.write([metric]))
    except PublishError as e:
        ctx.exception_raised = e


# === Assertions ===
@then(parsers.parse("the publisher receives {count:d} requests"))
def step_request_count(ctx: FlushScenarioContext, count: int) -> None:
    assert len(ctx.publisher.requests) == count


@then(parsers.parse('the request sizes are "{sizes}"'))
def step_request_sizes(ctx: FlushScenarioContext, sizes: str) -> None:
    expected = [int(size) for size in _split_list(sizes)]
    assert [len(batch) for _, batch in ctx.publisher.requests] == expected


@then(parsers.parse('the published datum names are "{names}"'))
def step_datum_names(ctx: FlushScenarioContext, names: str) -> None:
    assert [d.metric_name for d in ctx.publisher.datums] == _split_list(names)


@then(parsers.parse("{count:d} published datum carries statistic values"))
def step_statistic_count(ctx: FlushScenarioContext, count: int) -> None:
    assert sum(1 for d in ctx.publisher.datums if d.is_statistic) == count


@then("the write fails with a publish error")
def step_write_failed(ctx: FlushScenarioContext) -> None:
    assert isinstance(ctx.exception_raised, PublishError)
