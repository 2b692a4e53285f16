"""Transports that deliver chat requests to a provider."""

from chat_relay.llm.providers.base import BaseTransport
from chat_relay.llm.providers.http import HttpTransport

__all__ = ["BaseTransport", "HttpTransport"]
