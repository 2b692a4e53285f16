"""Completion request handler.

Public API (the "studs"):
    CompletionHandler: Relays a user message and records the exchange
    CLEAR_COMMAND: Input that resets the conversation
    CLEAR_CONFIRMATION: Reply returned after a reset
    EMPTY_REPLY_PLACEHOLDER: Reply returned when the provider sends empty text
"""

import json
import logging
from typing import Any

from pydantic import ValidationError

from chat_relay.llm.config import RelayConfig
from chat_relay.llm.conversation import Conversation
from chat_relay.llm.exceptions import ConfigurationError, DecodeError, ProviderError
from chat_relay.llm.providers.base import BaseTransport
from chat_relay.llm.types import ChatCompletion, ChatRequest, ErrorBody, Turn

_logger = logging.getLogger(__name__)

CLEAR_COMMAND = "/clear"
CLEAR_CONFIRMATION = "Conversation context cleared."
EMPTY_REPLY_PLACEHOLDER = (
    "[The API returned empty content. If this keeps happening, send /clear to reset the context.]"
)


def _decode(body: bytes) -> dict[str, Any]:
    try:
        data = json.loads(body)
    except ValueError as e:
        _logger.warning("Provider returned a non-JSON body: %r", body[:200])
        raise DecodeError(f"Provider response is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise DecodeError(f"Provider response must be a JSON object, got {type(data).__name__}")
    return data


class CompletionHandler:
    """Forwards user messages to the provider and keeps the running history.

    Each handler owns a default Conversation; callers serving several chats
    pass their own (see ConversationStore).

    Example:
        >>> handler = CompletionHandler(RelayConfig(api_key="sk-..."))
        >>> handler.complete("Hello!")
        'Hi there! How can I help?'
        >>> handler.complete("/clear")
        'Conversation context cleared.'
    """

    def __init__(
        self,
        config: RelayConfig,
        transport: BaseTransport | None = None,
        conversation: Conversation | None = None,
    ) -> None:
        if transport is None:
            from chat_relay.llm.providers.http import HttpTransport

            transport = HttpTransport(config)

        self._config = config
        self._transport = transport
        self.conversation = conversation if conversation is not None else Conversation()

    @property
    def config(self) -> RelayConfig:
        return self._config

    @property
    def history(self) -> tuple[Turn, ...]:
        """Turns of the default conversation, oldest first."""
        return tuple(self.conversation.snapshot())

    def reset(self) -> None:
        """Clear the default conversation."""
        self.conversation.clear()

    def complete(self, message: str, conversation: Conversation | None = None) -> str:
        """Relay one user message and return the reply text.

        Args:
            message: User input; ``/clear`` (any case) resets the conversation
            conversation: Conversation to use instead of the handler's own

        Returns:
            Reply text, the empty-reply placeholder, or the provider's error
            message when it reports one (unless raise_provider_errors is set)

        Raises:
            ConfigurationError: No API key configured; nothing was sent
            TransportError: Request failed; the user turn stays in history
            DecodeError: Body is not a completion or error payload
            ProviderError: Provider reported an error and
                raise_provider_errors is enabled
        """
        if not self._config.has_api_key:
            raise ConfigurationError("missing API key")
        api_key = self._config.api_key.get_secret_value()

        conversation = conversation if conversation is not None else self.conversation

        with conversation.exchange_lock:
            if message.lower() == CLEAR_COMMAND:
                conversation.clear()
                _logger.info("Conversation cleared")
                return CLEAR_CONFIRMATION

            conversation.append(Turn(role="user", content=message))
            request = ChatRequest(model=self._config.model, messages=conversation.snapshot())

            body = self._transport.send(request, api_key)
            reply = self._handle_response(body, conversation)

        _logger.info("Reply: %s", reply)
        return reply

    def _handle_response(self, body: bytes, conversation: Conversation) -> str:
        data = _decode(body)

        try:
            completion = ChatCompletion.model_validate(data)
        except ValidationError as e:
            raise DecodeError(f"Unexpected completion payload: {e}") from e

        if completion.choices:
            turn = completion.choices[0].message
            conversation.append(turn)
            # History keeps the provider's text as-is, even when blank.
            return turn.content.strip() or EMPTY_REPLY_PLACEHOLDER

        try:
            error_body = ErrorBody.model_validate(data)
        except ValidationError as e:
            raise DecodeError(f"Unexpected error payload: {e}") from e

        message = error_body.message
        if message is None:
            raise DecodeError("Provider response has neither choices nor an error message")

        _logger.warning("Provider reported an error: %s", message)
        if self._config.raise_provider_errors:
            raise ProviderError(message)
        return message.strip()

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "CompletionHandler":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = [
    "CompletionHandler",
    "CLEAR_COMMAND",
    "CLEAR_CONFIRMATION",
    "EMPTY_REPLY_PLACEHOLDER",
]
