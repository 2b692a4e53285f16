"""Chat Relay - minimal chat-completion client with running history.

Chat Relay forwards a user's text message to an OpenAI-compatible
chat-completions API, relays the reply, and keeps the conversation so far
so that every request carries the full context.

Key components:
    - CompletionHandler: Relays one message per call and records the turns
    - Conversation / ConversationStore: Caller-owned histories
    - RelayConfig: API key, model and endpoint settings
    - CLI: ``chat-relay ask`` and an interactive ``chat-relay chat``

Quick start:
    # Install
    pip install chat-relay

    # Configure
    export OPENAI_API_KEY=sk-...

    # Use
    chat-relay ask "What is the capital of France?"
    chat-relay chat
"""

from .llm import (
    CompletionHandler,
    Conversation,
    ConversationStore,
    RelayConfig,
    create_handler,
)

__version__ = "0.1.0"

__all__ = [
    "CompletionHandler",
    "Conversation",
    "ConversationStore",
    "RelayConfig",
    "create_handler",
    "__version__",
]
