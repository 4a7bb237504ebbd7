"""Port interfaces for metric delivery.

These protocols define the contracts that sink and sender adapters must
implement. The core depends only on these interfaces, not on concrete
transports.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from sfxlambda.core.models import MetricPoint


@runtime_checkable
class MetricSinkPort(Protocol):
    """Port for delivering metric batches to a backend.

    Examples: HTTPSink, InMemorySink.
    """

    async def send_batch(self, points: Sequence[MetricPoint]) -> None:
        """Deliver one batch of metric points.

        Raises:
            TransportError: If the batch could not be delivered.
        """
        ...

    async def aclose(self) -> None:
        """Release transport resources."""
        ...


@runtime_checkable
class SenderPort(Protocol):
    """Port for handing batches off without waiting for delivery.

    Examples: BackgroundSender.
    """

    def submit(self, points: Sequence[MetricPoint]) -> None:
        """Schedule a batch for delivery and return immediately."""
        ...
