"""
Shared pytest fixtures for all tests.
"""
import itertools
from typing import Callable

import pytest

from forker import NO_PARENT, Conversation, InMemoryConversationStore, Message
from forker.config import Config


def build_messages(rows: list[tuple]) -> list[Message]:
    """Build messages from (messageId, parentMessageId, text) rows."""
    return [
        Message(messageId=message_id, parentMessageId=parent_id, text=text)
        for message_id, parent_id, text in rows
    ]


@pytest.fixture
def make_messages() -> Callable[[list[tuple]], list[Message]]:
    return build_messages


@pytest.fixture
def fork_messages() -> list[Message]:
    """
    Two roots, the second with a small subtree.

    [0] Root message 1
    [1] Root message 2
    ├── [2] Child of 1
    |   ├── [4]
    |   └── [5]
    └── [3] Child of 1
        ├── [6]
        └── [7]
            └── [8]
    """
    return [
        Message(messageId="0", parentMessageId=NO_PARENT, text="Root message 1", createdAt="2021-01-01"),
        Message(messageId="1", parentMessageId=NO_PARENT, text="Root message 2", createdAt="2021-01-01"),
        Message(messageId="2", parentMessageId="1", text="Child of 1", createdAt="2021-01-02"),
        Message(messageId="3", parentMessageId="1", text="Child of 1", createdAt="2021-01-03"),
        Message(messageId="4", parentMessageId="2", text="Child of 2", createdAt="2021-01-04"),
        Message(messageId="5", parentMessageId="2", text="Child of 2", createdAt="2021-01-05"),
        Message(messageId="6", parentMessageId="3", text="Child of 3", createdAt="2021-01-06"),
        Message(messageId="7", parentMessageId="3", text="Child of 3", createdAt="2021-01-07"),
        Message(messageId="8", parentMessageId="7", text="Child of 7", createdAt="2021-01-07"),
    ]


@pytest.fixture
def complex_messages() -> list[Message]:
    """
    [7] Root
    ├── [5]
    |   ├── [2]
    |   └── [3]
    |       └── [10]
    └── [6]
        ├── [1]
        └── [4]
    [8] Root
    └── [9]
    """
    return build_messages([
        ("7", NO_PARENT, "Message 7"),
        ("8", NO_PARENT, "Message 8"),
        ("5", "7", "Message 5"),
        ("6", "7", "Message 6"),
        ("9", "8", "Message 9"),
        ("2", "5", "Message 2"),
        ("3", "5", "Message 3"),
        ("1", "6", "Message 1"),
        ("4", "6", "Message 4"),
        ("10", "3", "Message 10"),
    ])


@pytest.fixture
def nested_messages() -> list[Message]:
    """
    [11] Root
    └── [13]
        ├── [15]
        ├── [16]
        |   └── [18]
        |       └── [19]
        |           └── [20]
        └── [21]
    [12] Root
    └── [14]
        └── [17]
    """
    return build_messages([
        ("11", NO_PARENT, "Message 11"),
        ("12", NO_PARENT, "Message 12"),
        ("13", "11", "Message 13"),
        ("14", "12", "Message 14"),
        ("15", "13", "Message 15"),
        ("16", "13", "Message 16"),
        ("21", "13", "Message 21"),
        ("17", "14", "Message 17"),
        ("18", "16", "Message 18"),
        ("19", "18", "Message 19"),
        ("20", "19", "Message 20"),
    ])


@pytest.fixture
def circular_messages() -> list[Message]:
    return build_messages([
        ("40", "42", "Message 40"),
        ("41", "40", "Message 41"),
        ("42", "41", "Message 42"),
    ])


@pytest.fixture
def original_conversation() -> Conversation:
    return Conversation(
        conversationId="abc123",
        title="Original Title",
        user="owner",
        endpoint="openAI",
        model="gpt-4o",
    )


@pytest.fixture
def store(original_conversation, fork_messages) -> InMemoryConversationStore:
    """In-memory store seeded with the fork fixture conversation."""
    store = InMemoryConversationStore()
    store.add(original_conversation, fork_messages)
    return store


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def sequential_ids() -> Callable[[], str]:
    """Deterministic id factory: "new-1", "new-2", ..."""
    counter = itertools.count(1)
    return lambda: f"new-{next(counter)}"
