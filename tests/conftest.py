"""Shared test fixtures for all test modules."""

from collections.abc import Callable, Sequence
from types import SimpleNamespace

import pytest

from sfxlambda.core.dispatcher import MetricDispatcher
from sfxlambda.core.models import MetricPoint

FUNCTION_ARN = "arn:aws:lambda:us-east-1:123456789012:function:orders"


class RecordingSender:
    """SenderPort double that keeps submitted batches in order."""

    def __init__(self) -> None:
        self.batches: list[list[MetricPoint]] = []

    def submit(self, points: Sequence[MetricPoint]) -> None:
        self.batches.append(list(points))

    @property
    def points(self) -> list[MetricPoint]:
        return [point for batch in self.batches for point in batch]


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host environment variables out of settings and dimensions."""
    for name in (
        "SIGNALFX_AUTH_TOKEN",
        "SIGNALFX_INGEST_ENDPOINT",
        "SIGNALFX_SEND_TIMEOUT_SECONDS",
        "AWS_EXECUTION_ENV",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def lambda_context() -> Callable[..., SimpleNamespace]:
    """Factory fixture for objects shaped like the lambda runtime context."""

    def _context(
        arn: str = f"{FUNCTION_ARN}:$LATEST",
        version: str = "$LATEST",
        name: str = "orders",
    ) -> SimpleNamespace:
        return SimpleNamespace(
            invoked_function_arn=arn,
            function_version=version,
            function_name=name,
            aws_request_id="c6af9ac6-7b61-11e6-9a41-93e812345678",
        )

    return _context


@pytest.fixture
def recording_sender() -> RecordingSender:
    """Fixture providing a sender that records batches instead of sending."""
    return RecordingSender()


@pytest.fixture
def dispatcher(recording_sender: RecordingSender) -> MetricDispatcher:
    """Fixture providing a dispatcher wired to the recording sender."""
    return MetricDispatcher(recording_sender)
