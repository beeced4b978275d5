"""
ConversationStore protocol and in-memory implementation.

The store is the abstract interface the forker reads conversations from and
writes forks to. Applications provide a database-backed implementation;
InMemoryConversationStore keeps everything in dicts.
"""

import logging
from typing import Protocol

from .models import Conversation, Message

logger = logging.getLogger(__name__)


class ConversationStore(Protocol):
    """Abstract interface for conversation persistence."""

    async def fetch_conversation(self, conversation_id: str) -> Conversation | None:
        """Return the conversation, or None if it does not exist."""
        ...

    async def fetch_messages(self, conversation_id: str) -> list[Message]:
        """Return every message of the conversation, in storage order."""
        ...

    async def save_conversation(self, conversation: Conversation) -> None:
        """Insert or replace a conversation."""
        ...

    async def save_messages(self, messages: list[Message]) -> None:
        """Insert or replace messages."""
        ...


class InMemoryConversationStore:
    """Dict-backed store. Reads and writes hand out copies."""

    def __init__(self) -> None:
        self.conversations: dict[str, Conversation] = {}
        self.messages: dict[str, list[Message]] = {}  # conversationId -> messages

    def add(self, conversation: Conversation, messages: list[Message]) -> None:
        """Seed a conversation and its messages synchronously."""
        self.conversations[conversation.conversationId] = conversation.model_copy(deep=True)
        self.messages[conversation.conversationId] = [
            m.model_copy(update={"conversationId": conversation.conversationId}, deep=True)
            for m in messages
        ]

    async def fetch_conversation(self, conversation_id: str) -> Conversation | None:
        conversation = self.conversations.get(conversation_id)
        return conversation.model_copy(deep=True) if conversation else None

    async def fetch_messages(self, conversation_id: str) -> list[Message]:
        return [m.model_copy(deep=True) for m in self.messages.get(conversation_id, [])]

    async def save_conversation(self, conversation: Conversation) -> None:
        self.conversations[conversation.conversationId] = conversation.model_copy(deep=True)

    async def save_messages(self, messages: list[Message]) -> None:
        for message in messages:
            bucket = self.messages.setdefault(message.conversationId or "", [])
            for index, existing in enumerate(bucket):
                if existing.messageId == message.messageId:
                    bucket[index] = message.model_copy(deep=True)
                    break
            else:
                bucket.append(message.model_copy(deep=True))
        logger.debug("Saved %d messages", len(messages))
