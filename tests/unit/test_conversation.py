"""Tests for Conversation and ConversationStore."""

import threading

from chat_relay.llm.conversation import Conversation, ConversationStore
from chat_relay.llm.types import Turn


class TestConversation:
    def test_starts_empty(self):
        assert len(Conversation()) == 0
        assert Conversation().snapshot() == []

    def test_seeded_turns_are_copied(self):
        seed = [Turn(role="user", content="hi")]
        conversation = Conversation(seed)
        seed.append(Turn(role="assistant", content="hello"))
        assert len(conversation) == 1

    def test_append_keeps_order(self):
        conversation = Conversation()
        conversation.append(Turn(role="user", content="one"))
        conversation.append(Turn(role="assistant", content="two"))
        assert [t.content for t in conversation.snapshot()] == ["one", "two"]

    def test_snapshot_is_a_copy(self):
        conversation = Conversation()
        snapshot = conversation.snapshot()
        snapshot.append(Turn(role="user", content="sneaky"))
        assert len(conversation) == 0

    def test_clear(self):
        conversation = Conversation([Turn(role="user", content="hi")])
        conversation.clear()
        assert len(conversation) == 0

    def test_concurrent_appends_are_not_lost(self):
        conversation = Conversation()

        def worker():
            for _ in range(200):
                conversation.append(Turn(role="user", content="x"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(conversation) == 1600


class TestConversationStore:
    def test_get_creates_once(self):
        store = ConversationStore()
        first = store.get("room-1")
        assert store.get("room-1") is first
        assert "room-1" in store
        assert len(store) == 1

    def test_keys_are_independent(self):
        store = ConversationStore()
        store.get("a").append(Turn(role="user", content="for a"))
        assert len(store.get("a")) == 1
        assert len(store.get("b")) == 0
        assert sorted(store.keys()) == ["a", "b"]

    def test_drop(self):
        store = ConversationStore()
        store.get("a")
        assert store.drop("a") is True
        assert store.drop("a") is False
        assert "a" not in store
