"""Core domain models for lambda invocation metrics."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class MetricKind(str, Enum):
    """Metric types accepted by the ingest API."""

    COUNTER = "counter"
    GAUGE = "gauge"
    CUMULATIVE_COUNTER = "cumulative_counter"


@dataclass(frozen=True)
class MetricPoint:
    """A single metric observation.

    Attributes:
        name: Metric name (e.g., function.invocations).
        value: Counter increment or gauge reading.
        kind: Metric type.
        dimensions: Key-value pairs for metric dimensions.
        timestamp: Unix timestamp in seconds, or None to be stamped at dispatch.
    """

    name: str
    value: int | float
    kind: MetricKind
    dimensions: dict[str, str] = field(default_factory=dict)
    timestamp: float | None = None


@dataclass(frozen=True)
class InvocationContext:
    """Per-invocation data supplied by the lambda runtime.

    Attributes:
        identifier: Invoked function ARN.
        function_version: Version of the function handling the invocation.
        function_name: Name of the function handling the invocation.
    """

    identifier: str
    function_version: str
    function_name: str

    @classmethod
    def from_lambda_context(cls, context: Any) -> "InvocationContext":
        """Build from the context object the lambda runtime passes to handlers.

        Missing attributes read as empty strings.
        """
        return cls(
            identifier=str(getattr(context, "invoked_function_arn", "") or ""),
            function_version=str(getattr(context, "function_version", "") or ""),
            function_name=str(getattr(context, "function_name", "") or ""),
        )
