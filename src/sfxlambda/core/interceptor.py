"""Invocation interceptor that measures a wrapped lambda handler."""

import threading
import time
from collections.abc import Callable
from typing import Any

from sfxlambda.core.dispatcher import MetricDispatcher
from sfxlambda.core.metrics import (
    COLD_STARTS,
    DURATION,
    ERRORS,
    INVOCATIONS,
    counter,
    gauge,
)
from sfxlambda.core.models import InvocationContext, MetricPoint

Handler = Callable[[Any, Any], Any]


class InvocationInterceptor:
    """Wraps a handler to emit invocation, cold start, duration and error metrics.

    One instance is meant to live for the whole process; its cold start flag
    is cleared by the first invocation and never reset.
    """

    def __init__(self, handler: Handler, dispatcher: MetricDispatcher) -> None:
        self.handler = handler
        self.dispatcher = dispatcher
        self._cold_start_lock = threading.Lock()
        self._warm = False

    @property
    def warm(self) -> bool:
        """True once the first invocation has been observed."""
        return self._warm

    def _claim_cold_start(self) -> bool:
        """Return True exactly once per instance."""
        with self._cold_start_lock:
            if self._warm:
                return False
            self._warm = True
            return True

    def invoke(self, event: Any, context: Any) -> Any:
        """Call the wrapped handler and dispatch metrics for the call.

        The handler's return value is returned as-is and its exception is
        re-raised unchanged.
        """
        start_time = time.perf_counter()
        invocation = InvocationContext.from_lambda_context(context)
        points: list[MetricPoint] = [counter(INVOCATIONS)]
        if self._claim_cold_start():
            points.append(counter(COLD_STARTS))

        failed = False
        try:
            return self.handler(event, context)
        except BaseException:
            failed = True
            raise
        finally:
            points.append(gauge(DURATION, time.perf_counter() - start_time))
            if failed:
                points.append(counter(ERRORS))
            self.dispatcher.dispatch(invocation, points)
