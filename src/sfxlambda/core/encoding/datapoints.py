"""JSON encoder for the SignalFx v2 datapoint API."""

import json
from collections.abc import Iterable
from typing import Any

from sfxlambda.core.models import MetricKind, MetricPoint


def _encode_point(point: MetricPoint) -> dict[str, Any]:
    """Encode a single point, with its timestamp in milliseconds."""
    obj: dict[str, Any] = {
        "metric": point.name,
        "value": point.value,
        "dimensions": point.dimensions,
    }
    if point.timestamp is not None:
        obj["timestamp"] = round(point.timestamp * 1000)
    return obj


def encode_datapoints(points: Iterable[MetricPoint]) -> str:
    """Encode metric points to a v2 datapoint request body.

    Args:
        points: An iterable of MetricPoint objects.

    Returns:
        JSON object keyed by metric type, each holding a list of points.
        Types without points are left out; no points gives "{}".
    """
    grouped: dict[str, list[dict[str, Any]]] = {}
    for point in points:
        grouped.setdefault(MetricKind(point.kind).value, []).append(
            _encode_point(point)
        )
    return json.dumps(grouped)
