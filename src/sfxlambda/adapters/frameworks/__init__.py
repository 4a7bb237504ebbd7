"""Framework adapters that put the interceptor in front of a handler."""

from sfxlambda.adapters.frameworks.aws_lambda import (
    LambdaHandlerWrapper,
    create_dispatcher,
    wrap_handler,
)

__all__ = ["LambdaHandlerWrapper", "create_dispatcher", "wrap_handler"]
