"""Message model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from ..constants import NO_PARENT


class Message(BaseModel):
    """A chat message as stored for a conversation.

    Only the identifier fields are interpreted; any other payload (text,
    attachments, timestamps) rides along as extra fields.
    """

    model_config = ConfigDict(extra="allow")

    messageId: str
    parentMessageId: str = NO_PARENT
    conversationId: str | None = None
    user: str | None = None

    @field_validator("parentMessageId", mode="before")
    @classmethod
    def _default_parent(cls, value: Any) -> Any:
        return NO_PARENT if value is None else value

    @property
    def is_root(self) -> bool:
        return self.parentMessageId == NO_PARENT
