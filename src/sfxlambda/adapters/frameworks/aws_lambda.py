"""AWS Lambda adapter: decorator that instruments a ``handler(event, context)``.

Example:
    ```python
    from sfxlambda import counter, wrap_handler

    @wrap_handler
    def handler(event, context):
        handler.send_metrics(context, counter("orders.processed"))
        return {"ok": True}
    ```

The decorator runs at import time, which the lambda runtime does once per
process, so the sink settings are read and validated once and the cold start
flag lives as long as the process.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any

from sfxlambda.adapters.sender import BackgroundSender
from sfxlambda.adapters.sinks.http import HTTPSink
from sfxlambda.config import (
    LambdaEnvironment,
    SinkSettings,
    load_lambda_environment,
    load_sink_settings,
)
from sfxlambda.core.dispatcher import MetricDispatcher
from sfxlambda.core.interceptor import Handler, InvocationInterceptor
from sfxlambda.core.models import InvocationContext, MetricPoint

logger = logging.getLogger(__name__)


def create_dispatcher(
    settings: SinkSettings | None = None,
    environment: LambdaEnvironment | None = None,
) -> MetricDispatcher:
    """Build a dispatcher sending over HTTP from a background thread.

    Args:
        settings: Sink settings; loaded from the environment when omitted.
        environment: Lambda environment; loaded from the environment when omitted.

    Raises:
        ConfigurationError: If the sink settings are missing or malformed.
    """
    if settings is None:
        settings = load_sink_settings()
    if environment is None:
        environment = load_lambda_environment()
    sender = BackgroundSender(HTTPSink(settings))
    logger.info("Sending lambda metrics to %s", settings.datapoint_endpoint)
    return MetricDispatcher(sender, execution_env=environment.execution_env)


class LambdaHandlerWrapper:
    """Callable that stands in for the decorated lambda handler."""

    def __init__(self, handler: Handler, dispatcher: MetricDispatcher) -> None:
        self.interceptor = InvocationInterceptor(handler, dispatcher)
        self.dispatcher = dispatcher
        functools.update_wrapper(self, handler)

    def __call__(self, event: Any, context: Any) -> Any:
        return self.interceptor.invoke(event, context)

    def send_metrics(self, context: Any, *points: MetricPoint) -> None:
        """Send custom metric points with the invocation's default dimensions.

        Args:
            context: The lambda context object of the current invocation.
            *points: Points built with counter(), gauge() or cumulative_counter().
        """
        self.dispatcher.dispatch(InvocationContext.from_lambda_context(context), points)


def wrap_handler(
    handler: Handler | None = None,
    *,
    dispatcher: MetricDispatcher | None = None,
) -> LambdaHandlerWrapper | Callable[[Handler], LambdaHandlerWrapper]:
    """Instrument a lambda handler.

    Usable bare (``@wrap_handler``) or with arguments
    (``@wrap_handler(dispatcher=...)``).

    Args:
        handler: Function of shape ``handler(event, context)``.
        dispatcher: Dispatcher to use; one from create_dispatcher() by default.

    Raises:
        ConfigurationError: If no dispatcher is given and the sink settings
            are missing or malformed.
    """

    def decorate(func: Handler) -> LambdaHandlerWrapper:
        return LambdaHandlerWrapper(func, dispatcher or create_dispatcher())

    if handler is None:
        return decorate
    return decorate(handler)
