"""Conversion of metric tags into CloudWatch dimensions."""

from collections.abc import Mapping

from cwmetrics.core.models import MAX_DIMENSIONS, Dimension


def build_dimensions(
    tags: Mapping[str, str],
    max_dimensions: int = MAX_DIMENSIONS,
) -> list[Dimension]:
    """Build the dimension list for a metric's tags.

    Tags are taken in ascending key order. Tags with an empty value are
    skipped and do not count toward the cap; tags past the cap are dropped.

    Args:
        tags: Tag key to tag value mapping.
        max_dimensions: Maximum number of dimensions to return.

    Returns:
        Ordered list of at most max_dimensions Dimension objects.
    """
    dimensions: list[Dimension] = []
    for key in sorted(tags):
        if len(dimensions) >= max_dimensions:
            break
        value = tags[key]
        if value == "":
            continue
        dimensions.append(Dimension(name=key, value=value))
    return dimensions
