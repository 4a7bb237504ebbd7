"""sfxlambda - invocation metrics for AWS Lambda handlers.

Wrap a handler to emit invocation, cold start, duration and error metrics
to SignalFx without adding instrumentation code to it.
"""

from sfxlambda.adapters.frameworks.aws_lambda import (
    LambdaHandlerWrapper,
    create_dispatcher,
    wrap_handler,
)
from sfxlambda.adapters.sender import BackgroundSender
from sfxlambda.adapters.sinks import HTTPSink, InMemorySink
from sfxlambda.config import (
    LambdaEnvironment,
    SinkSettings,
    load_lambda_environment,
    load_sink_settings,
)
from sfxlambda.core.dimensions import derive_dimensions
from sfxlambda.core.dispatcher import MetricDispatcher
from sfxlambda.core.errors import ConfigurationError, SfxLambdaError, TransportError
from sfxlambda.core.interceptor import InvocationInterceptor
from sfxlambda.core.metrics import counter, cumulative_counter, gauge
from sfxlambda.core.models import InvocationContext, MetricKind, MetricPoint
from sfxlambda.core.ports import MetricSinkPort, SenderPort

__all__ = [
    # Decorator and bootstrap
    "wrap_handler",
    "LambdaHandlerWrapper",
    "create_dispatcher",
    # Core
    "InvocationInterceptor",
    "MetricDispatcher",
    "derive_dimensions",
    "InvocationContext",
    "MetricKind",
    "MetricPoint",
    "counter",
    "gauge",
    "cumulative_counter",
    # Ports
    "MetricSinkPort",
    "SenderPort",
    # Adapters
    "BackgroundSender",
    "HTTPSink",
    "InMemorySink",
    # Configuration
    "SinkSettings",
    "LambdaEnvironment",
    "load_sink_settings",
    "load_lambda_environment",
    # Errors
    "SfxLambdaError",
    "ConfigurationError",
    "TransportError",
]
