"""Adapters connecting the core to CloudWatch and to callers."""
