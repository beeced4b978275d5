"""Conversation model."""

from pydantic import BaseModel, ConfigDict, Field


class Conversation(BaseModel):
    model_config = ConfigDict(extra="allow")

    conversationId: str
    title: str | None = None
    user: str | None = None
    endpoint: str | None = None
    parentConversationId: str | None = Field(
        default=None,
        description="Conversation ID this conversation was forked from"
    )
    forkPoint: str | None = Field(
        default=None,
        description="Message ID in the parent conversation the fork pivoted on"
    )
    createdAt: float | str | None = None
    updatedAt: float | str | None = None
