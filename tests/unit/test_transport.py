"""Tests for the HTTP transport with a mocked endpoint."""

import httpx
import pytest

from chat_relay.llm.config import RelayConfig
from chat_relay.llm.exceptions import TransportError
from chat_relay.llm.providers.base import BaseTransport
from chat_relay.llm.providers.http import HttpTransport
from chat_relay.llm.types import ChatRequest, Turn


def _request() -> ChatRequest:
    return ChatRequest(model="gpt-3.5-turbo", messages=[Turn(role="user", content="Hello")])


class TestHttpTransport:
    def test_is_base_transport(self, provider):
        transport = HttpTransport(RelayConfig(), client=provider.client())
        assert isinstance(transport, BaseTransport)

    def test_posts_json_with_bearer_auth(self, provider, completion_body):
        provider.reply(completion_body("Hi"))
        transport = HttpTransport(RelayConfig(), client=provider.client())

        transport.send(_request(), "sk-test")

        sent = provider.requests[0]
        assert sent.method == "POST"
        assert str(sent.url) == "https://api.openai.com/v1/chat/completions"
        assert sent.headers["Content-Type"] == "application/json"
        assert sent.headers["Authorization"] == "Bearer sk-test"
        assert provider.request_json() == {
            "model": "gpt-3.5-turbo",
            "messages": [{"role": "user", "content": "Hello"}],
        }

    def test_custom_endpoint(self, provider, completion_body):
        provider.reply(completion_body("Hi"))
        config = RelayConfig(endpoint="http://localhost:8080/v1/chat/completions")
        HttpTransport(config, client=provider.client()).send(_request(), "sk-test")
        assert str(provider.requests[0].url) == "http://localhost:8080/v1/chat/completions"

    def test_returns_raw_body(self, provider):
        provider.reply_raw(b"not json at all")
        transport = HttpTransport(RelayConfig(), client=provider.client())
        assert transport.send(_request(), "sk-test") == b"not json at all"

    def test_error_status_is_not_raised(self, provider):
        provider.reply({"error": {"message": "quota exceeded"}}, status_code=429)
        transport = HttpTransport(RelayConfig(), client=provider.client())
        assert b"quota exceeded" in transport.send(_request(), "sk-test")

    def test_connection_error_maps_to_transport_error(self, provider):
        provider.fail(httpx.ConnectError("connection refused"))
        transport = HttpTransport(RelayConfig(), client=provider.client())

        with pytest.raises(TransportError, match="connection refused") as exc_info:
            transport.send(_request(), "sk-test")
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_timeout_maps_to_transport_error(self, provider):
        provider.fail(httpx.ReadTimeout("timed out"))
        transport = HttpTransport(RelayConfig(timeout_seconds=5), client=provider.client())
        with pytest.raises(TransportError):
            transport.send(_request(), "sk-test")

    def test_owned_client_has_no_deadline_by_default(self):
        transport = HttpTransport(RelayConfig())
        try:
            assert transport._client.timeout.connect is None
            assert transport._client.timeout.read is None
        finally:
            transport.close()

    def test_owned_client_uses_configured_timeout(self):
        transport = HttpTransport(RelayConfig(timeout_seconds=12))
        try:
            assert transport._client.timeout.read == 12
        finally:
            transport.close()

    def test_injected_client_is_not_closed(self, provider):
        client = provider.client()
        with HttpTransport(RelayConfig(), client=client):
            pass
        assert client.is_closed is False

    def test_owned_client_is_closed(self):
        transport = HttpTransport(RelayConfig())
        transport.close()
        assert transport._client.is_closed is True
