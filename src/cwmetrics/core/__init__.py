"""Pure conversion of metric records into CloudWatch datums."""
