"""Configuration for the CloudWatch output."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

# PutMetricData batch limits
DEFAULT_BATCH_SIZE = 20
MAX_BATCH_SIZE = 1000

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _parse_bool(name: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


@dataclass(frozen=True)
class CloudWatchOutputConfig:
    """Settings for one CloudWatch output.

    Attributes:
        namespace: CloudWatch namespace the datums are published under.
        region_name: AWS region for the client (default: boto3 resolution).
        endpoint_url: Endpoint override, e.g. a local emulator.
        high_resolution_metrics: Publish with 1 second storage resolution.
        write_statistics: Publish _max/_min/_sum/_count fields as statistic sets.
        batch_size: Datums per PutMetricData request.
    """

    namespace: str
    region_name: str | None = None
    endpoint_url: str | None = None
    high_resolution_metrics: bool = False
    write_statistics: bool = False
    batch_size: int = DEFAULT_BATCH_SIZE

    def __post_init__(self) -> None:
        if not self.namespace:
            raise ValueError("namespace must not be empty")
        if not 1 <= self.batch_size <= MAX_BATCH_SIZE:
            raise ValueError(
                f"batch_size must be between 1 and {MAX_BATCH_SIZE}, "
                f"got {self.batch_size}"
            )

    @classmethod
    def from_env(
        cls,
        prefix: str = "CLOUDWATCH_",
        environ: Mapping[str, str] | None = None,
    ) -> "CloudWatchOutputConfig":
        """Build a config from environment variables.

        Reads <prefix>NAMESPACE, REGION, ENDPOINT_URL, HIGH_RESOLUTION_METRICS,
        WRITE_STATISTICS and BATCH_SIZE.

        Args:
            prefix: Variable name prefix.
            environ: Mapping to read from (default: os.environ).

        Raises:
            ValueError: If a variable is missing or malformed.
        """
        env = os.environ if environ is None else environ
        batch_size_raw = env.get(f"{prefix}BATCH_SIZE", str(DEFAULT_BATCH_SIZE))
        try:
            batch_size = int(batch_size_raw)
        except ValueError:
            raise ValueError(
                f"{prefix}BATCH_SIZE must be an integer, got {batch_size_raw!r}"
            ) from None
        return cls(
            namespace=env.get(f"{prefix}NAMESPACE", ""),
            region_name=env.get(f"{prefix}REGION") or None,
            endpoint_url=env.get(f"{prefix}ENDPOINT_URL") or None,
            high_resolution_metrics=_parse_bool(
                f"{prefix}HIGH_RESOLUTION_METRICS",
                env.get(f"{prefix}HIGH_RESOLUTION_METRICS", ""),
            ),
            write_statistics=_parse_bool(
                f"{prefix}WRITE_STATISTICS",
                env.get(f"{prefix}WRITE_STATISTICS", ""),
            ),
            batch_size=batch_size,
        )
