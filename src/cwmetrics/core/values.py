"""Normalization of metric field values into CloudWatch datum values."""

import math
import numbers
from typing import Any

# Magnitude range accepted by PutMetricData for non-zero values
MIN_DATUM_MAGNITUDE = 8.515920e-109
MAX_DATUM_MAGNITUDE = 1.174271e108


def is_valid_datum_value(value: float) -> bool:
    """Check a float against the range CloudWatch accepts.

    Args:
        value: Candidate datum value.

    Returns:
        True if the value is zero (either sign) or finite with a magnitude
        inside [MIN_DATUM_MAGNITUDE, MAX_DATUM_MAGNITUDE].
    """
    if math.isnan(value) or math.isinf(value):
        return False
    if value == 0:
        return True
    return MIN_DATUM_MAGNITUDE <= abs(value) <= MAX_DATUM_MAGNITUDE


def to_datum_value(value: Any) -> float | None:
    """Convert a field value into a datum value.

    Booleans become 1.0 or 0.0, integral and real numbers become floats.
    Anything else, and any number CloudWatch would reject, yields None.

    Args:
        value: Raw field value from a metric record.

    Returns:
        The float to publish, or None if the field cannot be published.
    """
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, numbers.Integral):
        try:
            converted = float(int(value))
        except OverflowError:
            return None
    elif isinstance(value, numbers.Real):
        try:
            converted = float(value)
        except OverflowError:
            return None
    else:
        return None
    if not is_valid_datum_value(converted):
        return None
    return converted
