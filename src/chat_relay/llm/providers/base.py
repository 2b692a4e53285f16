"""Abstract base class for chat-completion transports.

Public API (the "studs"):
    BaseTransport: Abstract base class for transports
"""

from abc import ABC, abstractmethod

from chat_relay.llm.types import ChatRequest


class BaseTransport(ABC):
    """Abstract base class for transports.

    A transport delivers one serialized request and hands back the raw
    response body. Decoding is left to the caller so that success and error
    payloads can be told apart from the same bytes.
    """

    @abstractmethod
    def send(self, request: ChatRequest, api_key: str) -> bytes:
        """Send a request synchronously.

        Args:
            request: Request payload
            api_key: Bearer token for the provider

        Returns:
            Raw response body

        Raises:
            TransportError: If the request could not be delivered
        """
        ...

    def close(self) -> None:
        """Release any held resources."""

    def __enter__(self) -> "BaseTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["BaseTransport"]
