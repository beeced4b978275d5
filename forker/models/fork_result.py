"""ForkResult model."""

from pydantic import BaseModel, Field

from .conversation import Conversation
from .message import Message


class ForkResult(BaseModel):
    conversation: Conversation
    messages: list[Message] = Field(default_factory=list)
