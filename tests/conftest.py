"""Shared test fixtures."""

import json
from typing import Any

import httpx
import pytest

from chat_relay.llm.config import _ENV_MAP


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Keep credentials from the developer's environment out of the tests."""
    for env_var in _ENV_MAP.values():
        monkeypatch.delenv(env_var, raising=False)


class FakeProvider:
    """Stand-in chat-completions endpoint for httpx.MockTransport.

    Responses are served in the order they were queued; every request is
    recorded for inspection.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response | Exception] = []

    def reply(self, payload: Any, status_code: int = 200) -> "FakeProvider":
        self._responses.append(httpx.Response(status_code, json=payload))
        return self

    def reply_raw(self, body: bytes, status_code: int = 200) -> "FakeProvider":
        self._responses.append(httpx.Response(status_code, content=body))
        return self

    def fail(self, exc: Exception) -> "FakeProvider":
        self._responses.append(exc)
        return self

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def request_json(self, index: int = -1) -> dict[str, Any]:
        return json.loads(self.requests[index].content)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self))


def completion(content: str | None, role: str = "assistant", **extra: Any) -> dict[str, Any]:
    """Build a chat-completions response body with a single choice."""
    body = {
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "created": 1677652288,
        "choices": [
            {
                "index": 0,
                "message": {"role": role, "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 9, "completion_tokens": 12, "total_tokens": 21},
    }
    body.update(extra)
    return body


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def completion_body():
    """Builder for single-choice completion bodies."""
    return completion
