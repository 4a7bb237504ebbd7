"""Process-wide settings loaded from environment variables."""

import logging
import math
from urllib.parse import urljoin

from pydantic import Field, HttpUrl, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sfxlambda.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_INGEST_ENDPOINT = "https://ingest.signalfx.com"
DATAPOINT_PATH = "v2/datapoint"
DEFAULT_SEND_TIMEOUT_SECONDS = 5.0


class SinkSettings(BaseSettings):
    """Settings for the metrics ingest sink."""

    model_config = SettingsConfigDict(
        env_prefix="SIGNALFX_",
        case_sensitive=False,
        env_ignore_empty=True,
        frozen=True,
    )

    auth_token: str = Field(description="Access token sent with every batch")
    ingest_endpoint: HttpUrl = Field(
        default=DEFAULT_INGEST_ENDPOINT,
        validate_default=True,
        description="Base URL of the ingest service",
    )
    send_timeout_seconds: float = Field(
        default=DEFAULT_SEND_TIMEOUT_SECONDS,
        gt=0,
        description="HTTP timeout for one batch, in seconds",
    )

    @field_validator("auth_token")
    @classmethod
    def _token_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("auth token cannot be blank")
        return value

    @field_validator("send_timeout_seconds", mode="before")
    @classmethod
    def _strip_timeout(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("send_timeout_seconds")
    @classmethod
    def _timeout_finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("send timeout must be a finite number of seconds")
        return value

    @property
    def datapoint_endpoint(self) -> str:
        """Full URL that datapoint batches are posted to."""
        return urljoin(str(self.ingest_endpoint), DATAPOINT_PATH)


class LambdaEnvironment(BaseSettings):
    """Settings the lambda runtime exposes through the environment."""

    model_config = SettingsConfigDict(
        env_prefix="AWS_",
        case_sensitive=False,
        env_ignore_empty=True,
        frozen=True,
    )

    execution_env: str | None = Field(
        default=None, description="Runtime marker, e.g. AWS_Lambda_python3.12"
    )


def load_sink_settings(**overrides: object) -> SinkSettings:
    """Load sink settings from the environment.

    Args:
        **overrides: Field values taking precedence over the environment.

    Raises:
        ConfigurationError: If a setting is missing or malformed.
    """
    try:
        return SinkSettings(**overrides)
    except ValidationError as exc:
        logger.error("Invalid SignalFx sink configuration: %s", exc)
        raise ConfigurationError(f"Invalid SignalFx sink configuration: {exc}") from exc


def load_lambda_environment() -> LambdaEnvironment:
    """Load the lambda runtime environment settings."""
    return LambdaEnvironment()
