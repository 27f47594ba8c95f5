"""Encoders for CloudWatch request payloads."""

from cwmetrics.core.encoding.cloudwatch import encode_datum, encode_datums

__all__ = [
    "encode_datum",
    "encode_datums",
]
