"""Custom exceptions for the lambda metrics wrapper."""


class SfxLambdaError(Exception):
    """Base exception for lambda metrics wrapper errors."""


class ConfigurationError(SfxLambdaError):
    """Raised when startup settings are missing or malformed."""


class TransportError(SfxLambdaError):
    """Raised when a metric batch cannot be delivered to the sink."""
