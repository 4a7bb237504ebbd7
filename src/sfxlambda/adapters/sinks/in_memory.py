"""In-memory sink adapter."""

from collections.abc import AsyncIterable, Sequence

from sfxlambda.core.models import MetricPoint


class InMemorySink:
    """In-memory implementation of MetricSinkPort.

    Keeps every batch it receives. Suitable for testing and local runs
    where nothing should leave the process.
    """

    def __init__(self) -> None:
        self.batches: list[list[MetricPoint]] = []
        self.closed = False

    async def send_batch(self, points: Sequence[MetricPoint]) -> None:
        """Record a batch of points."""
        self.batches.append(list(points))

    async def scrape(self) -> AsyncIterable[MetricPoint]:
        """Yield every point received so far, in arrival order."""
        for batch in self.batches:
            for point in batch:
                yield point

    async def aclose(self) -> None:
        self.closed = True
