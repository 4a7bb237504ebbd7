"""Background sender that delivers metric batches off the invocation path.

Batches are handed to an asyncio event loop running on a daemon thread.
``submit()`` only schedules the send and returns; the invocation may finish
(and the runtime may freeze or recycle the process) before delivery happens.
There is no delivery guarantee on process exit: batches still in flight are
lost. Delivery failures are logged and never raised to the submitter.
"""

import asyncio
import concurrent.futures
import logging
import threading
from collections.abc import Sequence

from sfxlambda.core.models import MetricPoint
from sfxlambda.core.ports import MetricSinkPort

logger = logging.getLogger(__name__)


class BackgroundSender:
    """Fire-and-forget implementation of SenderPort."""

    def __init__(
        self, sink: MetricSinkPort, *, name: str = "sfxlambda-sender"
    ) -> None:
        """Initialize the sender.

        Args:
            sink: Transport the batches are delivered through.
            name: Name of the background thread.
        """
        self.sink = sink
        self._name = name
        self._lock = threading.Lock()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread: threading.Thread | None = None
        self._pending: set[concurrent.futures.Future[None]] = set()

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def pending(self) -> int:
        """Number of batches submitted but not yet finished."""
        with self._lock:
            return len(self._pending)

    def start(self) -> asyncio.AbstractEventLoop:
        """Start the background loop if needed and return it."""
        with self._lock:
            if self._loop is not None:
                return self._loop
            loop = asyncio.new_event_loop()
            thread = threading.Thread(
                target=self._run_loop, args=(loop,), name=self._name, daemon=True
            )
            thread.start()
            self._loop = loop
            self._thread = thread
            return loop

    def _run_loop(self, loop: asyncio.AbstractEventLoop) -> None:
        asyncio.set_event_loop(loop)
        try:
            loop.run_forever()
            self._cancel_in_flight(loop)
            loop.run_until_complete(self.sink.aclose())
        finally:
            loop.close()

    def _cancel_in_flight(self, loop: asyncio.AbstractEventLoop) -> None:
        """Cancel sends still running when the loop was stopped."""
        tasks = asyncio.all_tasks(loop)
        if not tasks:
            return
        logger.warning("Dropping %d in-flight datapoint batches on stop", len(tasks))
        for task in tasks:
            task.cancel()
        loop.run_until_complete(asyncio.gather(*tasks, return_exceptions=True))

    async def _send(self, points: Sequence[MetricPoint]) -> None:
        try:
            await self.sink.send_batch(points)
        except Exception:
            logger.exception("Error sending %d datapoints to SignalFx", len(points))

    def _discard(self, future: concurrent.futures.Future[None]) -> None:
        with self._lock:
            self._pending.discard(future)

    def submit(self, points: Sequence[MetricPoint]) -> None:
        """Schedule a batch for delivery and return immediately."""
        loop = self.start()
        future = asyncio.run_coroutine_threadsafe(self._send(list(points)), loop)
        with self._lock:
            self._pending.add(future)
        future.add_done_callback(self._discard)

    def flush(self, timeout: float | None = None) -> bool:
        """Wait for submitted batches to finish.

        Args:
            timeout: Maximum seconds to wait; None waits indefinitely.

        Returns:
            True if nothing is left in flight.
        """
        with self._lock:
            pending = list(self._pending)
        if not pending:
            return True
        _, not_done = concurrent.futures.wait(pending, timeout=timeout)
        return not not_done

    def stop(self, timeout: float | None = None) -> None:
        """Flush, close the sink and stop the background loop.

        Sends still running after the flush timeout are cancelled and logged.
        """
        self.flush(timeout)
        with self._lock:
            loop, thread = self._loop, self._thread
            self._loop = None
            self._thread = None
        if loop is None or thread is None:
            return
        loop.call_soon_threadsafe(loop.stop)
        thread.join(timeout)
