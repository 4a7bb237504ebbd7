"""Sink adapters implementing MetricSinkPort."""

from sfxlambda.adapters.sinks.http import HTTPSink
from sfxlambda.adapters.sinks.in_memory import InMemorySink

__all__ = ["HTTPSink", "InMemorySink"]
