"""Conversation history owned by the caller.

Public API (the "studs"):
    Conversation: Ordered, append-only turn history with its own locks
    ConversationStore: Conversations scoped by session key
"""

import logging
import threading

from chat_relay.llm.types import Turn

_logger = logging.getLogger(__name__)


class Conversation:
    """Ordered turn history for one chat.

    Mutations are atomic under an internal lock. ``exchange_lock`` is held by
    the completion handler for a whole request/reply cycle so that two
    callers sharing a conversation cannot interleave their turns.
    """

    def __init__(self, turns: list[Turn] | None = None) -> None:
        self._turns: list[Turn] = list(turns or [])
        self._lock = threading.Lock()
        self.exchange_lock = threading.RLock()

    def append(self, turn: Turn) -> None:
        with self._lock:
            self._turns.append(turn)

    def clear(self) -> None:
        with self._lock:
            self._turns = []

    def snapshot(self) -> list[Turn]:
        """Copy of the current turns, oldest first."""
        with self._lock:
            return list(self._turns)

    def __len__(self) -> int:
        with self._lock:
            return len(self._turns)

    def __repr__(self) -> str:
        return f"Conversation(turns={len(self)})"


class ConversationStore:
    """Conversations keyed by session (chat, user, channel...).

    Each key gets an independent history, created on first use.
    """

    def __init__(self) -> None:
        self._conversations: dict[str, Conversation] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Conversation:
        """Get the conversation for a key, creating it if needed."""
        with self._lock:
            conversation = self._conversations.get(key)
            if conversation is None:
                conversation = Conversation()
                self._conversations[key] = conversation
                _logger.debug("Created conversation for session %s", key)
            return conversation

    def drop(self, key: str) -> bool:
        """Forget a session's conversation.

        Returns:
            True if the key existed
        """
        with self._lock:
            return self._conversations.pop(key, None) is not None

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._conversations)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._conversations

    def __len__(self) -> int:
        with self._lock:
            return len(self._conversations)


__all__ = ["Conversation", "ConversationStore"]
