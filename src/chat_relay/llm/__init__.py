"""Chat-completion relay layer.

Forwards user messages to an OpenAI-compatible chat-completions endpoint
and keeps the running conversation history.

Public API (the "studs"):
    create_handler: Factory function to build a ready-to-use handler
    CompletionHandler: Relays messages and records each exchange
    RelayConfig: Configuration model
    load_config: Resolve configuration from YAML and environment
    Conversation: Caller-owned turn history
    ConversationStore: Conversations scoped by session key
    Turn: Message type for conversations
    BaseTransport: Abstract base class for transports (for custom transports)

Example:
    >>> from chat_relay.llm import create_handler, RelayConfig
    >>>
    >>> handler = create_handler(RelayConfig(api_key="sk-..."))
    >>> print(handler.complete("Hello!"))
    >>> handler.complete("/clear")
    'Conversation context cleared.'
    >>>
    >>> # One history per chat
    >>> store = ConversationStore()
    >>> handler.complete("Hi", conversation=store.get("room-42"))
"""

from chat_relay.llm.completions import (
    CLEAR_COMMAND,
    CLEAR_CONFIRMATION,
    EMPTY_REPLY_PLACEHOLDER,
    CompletionHandler,
)
from chat_relay.llm.config import RelayConfig, load_config
from chat_relay.llm.conversation import Conversation, ConversationStore
from chat_relay.llm.exceptions import (
    ConfigurationError,
    DecodeError,
    ProviderError,
    RelayError,
    TransportError,
)
from chat_relay.llm.factory import create_handler
from chat_relay.llm.providers.base import BaseTransport
from chat_relay.llm.types import ChatCompletion, ChatRequest, Choice, ErrorBody, Turn

__all__ = [
    # Factory
    "create_handler",
    # Handler
    "CompletionHandler",
    "CLEAR_COMMAND",
    "CLEAR_CONFIRMATION",
    "EMPTY_REPLY_PLACEHOLDER",
    # Config
    "RelayConfig",
    "load_config",
    # History
    "Conversation",
    "ConversationStore",
    # Types
    "Turn",
    "ChatRequest",
    "Choice",
    "ChatCompletion",
    "ErrorBody",
    # Base class (for custom transports)
    "BaseTransport",
    # Exceptions
    "RelayError",
    "ConfigurationError",
    "TransportError",
    "DecodeError",
    "ProviderError",
]
