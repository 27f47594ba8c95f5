"""Grouping of suffixed fields into CloudWatch statistic sets.

Fields named ``<prefix>_max``, ``<prefix>_min``, ``<prefix>_sum`` and
``<prefix>_count`` describe one pre-aggregated series. Grouping runs in
two passes: fields are first bucketed by prefix, then each bucket is
classified as a complete statistic set or as independent scalar fields.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from cwmetrics.core.models import StatisticSet


class StatisticType(Enum):
    """Statistic carried by a suffixed field name."""

    MAX = "max"
    MIN = "min"
    SUM = "sum"
    COUNT = "count"


# Statistics a bucket must hold to be published as one StatisticSet
SUMMARY_STATISTICS = frozenset(StatisticType)


def split_statistic_suffix(field_name: str) -> tuple[str, StatisticType | None]:
    """Split a field name into its prefix and statistic suffix.

    Args:
        field_name: Field name such as "latency_max".

    Returns:
        (prefix, StatisticType) for a recognised suffix with a non-empty
        prefix, otherwise (field_name, None).
    """
    prefix, sep, suffix = field_name.rpartition("_")
    if not sep or not prefix:
        return field_name, None
    try:
        return prefix, StatisticType(suffix)
    except ValueError:
        return field_name, None


@dataclass
class StatisticBucket:
    """Fields sharing one statistic prefix."""

    prefix: str
    values: dict[StatisticType, float] = field(default_factory=dict)
    field_names: dict[StatisticType, str] = field(default_factory=dict)

    @property
    def is_complete(self) -> bool:
        """Return True if every statistic in SUMMARY_STATISTICS is present."""
        return SUMMARY_STATISTICS.issubset(self.values)

    def to_statistic_set(self) -> StatisticSet:
        """Build the StatisticSet; only valid for a complete bucket."""
        return StatisticSet(
            maximum=self.values[StatisticType.MAX],
            minimum=self.values[StatisticType.MIN],
            sum=self.values[StatisticType.SUM],
            sample_count=self.values[StatisticType.COUNT],
        )


@dataclass(frozen=True)
class GroupedField:
    """A field or statistic set ready to become one datum.

    Attributes:
        name: Field name, or the statistic prefix for a summary.
        value: Scalar value when the entry is not a summary.
        statistic_values: Statistic set when the entry is a summary.
    """

    name: str
    value: float | None = None
    statistic_values: StatisticSet | None = None


def bucket_fields(
    fields: Mapping[str, float],
) -> list[str | StatisticBucket]:
    """First pass: bucket suffixed fields by prefix.

    Args:
        fields: Normalized field values keyed by field name.

    Returns:
        Entries in ascending order of their first field name: a plain
        field name, or a StatisticBucket for suffixed fields.
    """
    entries: list[str | StatisticBucket] = []
    buckets: dict[str, StatisticBucket] = {}
    for field_name in sorted(fields):
        prefix, statistic = split_statistic_suffix(field_name)
        if statistic is None:
            entries.append(field_name)
            continue
        bucket = buckets.get(prefix)
        if bucket is None:
            bucket = buckets[prefix] = StatisticBucket(prefix=prefix)
            entries.append(bucket)
        bucket.values[statistic] = fields[field_name]
        bucket.field_names[statistic] = field_name
    return entries


def group_fields(fields: Mapping[str, float]) -> list[GroupedField]:
    """Group normalized fields into statistic sets and scalar fields.

    A bucket holding every statistic in SUMMARY_STATISTICS becomes one
    summary entry named after its prefix. Incomplete buckets fall back to
    one scalar entry per field, keeping the full field name.

    Args:
        fields: Normalized field values keyed by field name.

    Returns:
        Grouped entries in deterministic order.
    """
    grouped: list[GroupedField] = []
    for entry in bucket_fields(fields):
        if isinstance(entry, str):
            grouped.append(GroupedField(name=entry, value=fields[entry]))
        elif entry.is_complete:
            grouped.append(
                GroupedField(
                    name=entry.prefix, statistic_values=entry.to_statistic_set()
                )
            )
        else:
            for field_name in sorted(entry.field_names.values()):
                grouped.append(GroupedField(name=field_name, value=fields[field_name]))
    return grouped
