"""HTTP transport for OpenAI-compatible chat-completions endpoints.

Public API (the "studs"):
    HttpTransport: Blocking POST with bearer-token auth
"""

import logging

import httpx

from chat_relay.llm.config import RelayConfig
from chat_relay.llm.exceptions import TransportError
from chat_relay.llm.providers.base import BaseTransport
from chat_relay.llm.types import ChatRequest

_logger = logging.getLogger(__name__)


class HttpTransport(BaseTransport):
    """POSTs the request JSON to ``config.endpoint``.

    The status code is not inspected: provider error bodies come back as
    bytes like any other response.
    """

    def __init__(self, config: RelayConfig, client: httpx.Client | None = None) -> None:
        self._config = config
        self._endpoint = config.endpoint
        self._owns_client = client is None
        if client is None:
            client = httpx.Client(timeout=config.timeout_seconds)
        self._client = client

    def send(self, request: ChatRequest, api_key: str) -> bytes:
        body = request.model_dump_json()
        _logger.debug("Request to %s: %s", self._endpoint, body)

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        }
        try:
            response = self._client.post(
                self._endpoint,
                content=body.encode("utf-8"),
                headers=headers,
            )
            data = response.read()
        except httpx.HTTPError as e:
            _logger.warning("Request to %s failed: %s", self._endpoint, e)
            raise TransportError(f"Request to {self._endpoint} failed: {e}") from e

        _logger.debug("Response %s from %s: %s", response.status_code, self._endpoint, data)
        return data

    def close(self) -> None:
        if self._owns_client:
            self._client.close()


__all__ = ["HttpTransport"]
