"""HTTP sink adapter posting metric batches to the datapoint ingest API."""

import logging
from collections.abc import Sequence

import httpx

from sfxlambda.config import SinkSettings
from sfxlambda.core.encoding.datapoints import encode_datapoints
from sfxlambda.core.errors import TransportError
from sfxlambda.core.models import MetricPoint

logger = logging.getLogger(__name__)

AUTH_HEADER = "X-SF-Token"
USER_AGENT = "sfxlambda-python"


class HTTPSink:
    """HTTP implementation of MetricSinkPort.

    The underlying httpx.AsyncClient is created lazily so that it binds to
    the event loop the sink is first used from.
    """

    def __init__(
        self,
        settings: SinkSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the sink.

        Args:
            settings: Auth token, endpoint and timeout.
            transport: Optional httpx transport (e.g. httpx.MockTransport).
        """
        self.settings = settings
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def endpoint(self) -> str:
        return self.settings.datapoint_endpoint

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                transport=self._transport,
                timeout=self.settings.send_timeout_seconds,
                headers={
                    AUTH_HEADER: self.settings.auth_token,
                    "Content-Type": "application/json",
                    "User-Agent": USER_AGENT,
                },
            )
        return self._client

    async def send_batch(self, points: Sequence[MetricPoint]) -> None:
        """Post one batch of points.

        Raises:
            TransportError: On connection failure, timeout or non-2xx status.
        """
        if not points:
            return
        body = encode_datapoints(points)
        try:
            response = await self._get_client().post(self.endpoint, content=body)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise TransportError(
                f"Failed to send {len(points)} datapoints to {self.endpoint}: {exc}"
            ) from exc
        logger.debug("Sent %d datapoints to %s", len(points), self.endpoint)

    async def aclose(self) -> None:
        """Close the HTTP client, if one was opened."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
