"""Metric dispatch: default dimensions, batch timestamp, hand-off to a sender."""

import logging
import time
from collections.abc import Sequence
from dataclasses import replace

from sfxlambda.core.dimensions import derive_dimensions
from sfxlambda.core.models import InvocationContext, MetricPoint
from sfxlambda.core.ports import SenderPort

logger = logging.getLogger(__name__)


def _prepare(
    point: MetricPoint, defaults: dict[str, str], now: float
) -> MetricPoint:
    """Return a copy of point with defaults merged in and a timestamp set."""
    return replace(
        point,
        dimensions={**defaults, **point.dimensions},
        timestamp=now if point.timestamp is None else point.timestamp,
    )


class MetricDispatcher:
    """Merges default dimensions into metric points and submits them.

    Submission is fire-and-forget: delivery failures are only logged by the
    sender and never reach the caller.
    """

    def __init__(self, sender: SenderPort, execution_env: str | None = None) -> None:
        """Initialize the dispatcher.

        Args:
            sender: Adapter that delivers batches in the background.
            execution_env: Optional execution environment marker added to
                every dimension set.
        """
        self.sender = sender
        self.execution_env = execution_env

    def default_dimensions(self, context: InvocationContext) -> dict[str, str]:
        """Derive the default dimensions for an invocation, logging diagnostics."""
        dimensions, diagnostics = derive_dimensions(
            context.identifier,
            context.function_version,
            context.function_name,
            self.execution_env,
        )
        for diagnostic in diagnostics:
            logger.warning("Dimension derivation: %s", diagnostic)
        return dimensions

    def dispatch(
        self, context: InvocationContext, points: Sequence[MetricPoint]
    ) -> None:
        """Stamp, enrich and submit one batch of points for an invocation.

        Args:
            context: Invocation the points were observed in.
            points: Metric points to send. Their own dimensions win over the
                defaults; an explicit timestamp is kept.
        """
        if not points:
            return
        defaults = self.default_dimensions(context)
        now = time.time()
        batch = [_prepare(point, defaults, now) for point in points]
        try:
            self.sender.submit(batch)
        except Exception:
            logger.exception("Error submitting %d datapoints", len(batch))
