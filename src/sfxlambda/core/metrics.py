"""Metric helper functions for creating MetricPoint objects."""

from sfxlambda.core.models import MetricKind, MetricPoint

INVOCATIONS = "function.invocations"
COLD_STARTS = "function.cold_starts"
DURATION = "function.duration"
ERRORS = "function.errors"


def counter(
    name: str,
    value: int = 1,
    dimensions: dict[str, str] | None = None,
    timestamp: float | None = None,
) -> MetricPoint:
    """Create a counter metric point.

    Args:
        name: Metric name (e.g., "function.invocations")
        value: Increment value (default: 1)
        dimensions: Optional dimensions
        timestamp: Optional Unix timestamp; left unset the dispatcher stamps it

    Returns:
        MetricPoint of kind COUNTER
    """
    return MetricPoint(
        name=name,
        value=value,
        kind=MetricKind.COUNTER,
        dimensions=dict(dimensions or {}),
        timestamp=timestamp,
    )


def gauge(
    name: str,
    value: float,
    dimensions: dict[str, str] | None = None,
    timestamp: float | None = None,
) -> MetricPoint:
    """Create a gauge metric point.

    Args:
        name: Metric name (e.g., "function.duration")
        value: Current gauge value
        dimensions: Optional dimensions
        timestamp: Optional Unix timestamp; left unset the dispatcher stamps it

    Returns:
        MetricPoint of kind GAUGE
    """
    return MetricPoint(
        name=name,
        value=value,
        kind=MetricKind.GAUGE,
        dimensions=dict(dimensions or {}),
        timestamp=timestamp,
    )


def cumulative_counter(
    name: str,
    value: int | float,
    dimensions: dict[str, str] | None = None,
    timestamp: float | None = None,
) -> MetricPoint:
    """Create a cumulative counter metric point (a running total)."""
    return MetricPoint(
        name=name,
        value=value,
        kind=MetricKind.CUMULATIVE_COUNTER,
        dimensions=dict(dimensions or {}),
        timestamp=timestamp,
    )
