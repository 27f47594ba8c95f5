"""Partitioning of datums into request-sized batches."""

from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def partition_datums(max_size: int, datums: Iterable[T]) -> list[list[T]]:
    """Split datums into consecutive batches of at most max_size.

    Args:
        max_size: Maximum batch size, must be positive.
        datums: Datums in submission order.

    Returns:
        Batches in input order. Every batch but the last holds exactly
        max_size items. Empty input returns an empty list.

    Raises:
        ValueError: If max_size is not positive.
    """
    if max_size <= 0:
        raise ValueError(f"max_size must be positive, got {max_size}")
    items = list(datums)
    return [items[start : start + max_size] for start in range(0, len(items), max_size)]
