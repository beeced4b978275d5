"""Identity remapping for forked messages."""

import logging
from collections.abc import Callable, Iterable

from .constants import NO_PARENT
from .models import Message, gen_id

logger = logging.getLogger(__name__)


def clone_messages(
    messages: Iterable[Message],
    conversation_id: str,
    user_id: str,
    id_factory: Callable[[], str] = gen_id,
) -> list[Message]:
    """
    Copy selected messages under fresh ids, keeping their parent links.

    Messages are processed in order. A message whose parent was cloned earlier
    is re-attached to the parent's new id; any other message becomes a root.
    Callers must therefore pass parents before their children.

    Args:
        messages: The selected messages, parents first
        conversation_id: ID of the conversation the copies belong to
        user_id: Owner of the copies
        id_factory: Source of new message ids

    Returns:
        One new message per input message, in the same order
    """
    id_mapping: dict[str, str] = {}
    cloned: list[Message] = []

    for message in messages:
        new_message_id = id_factory()
        parent_id = id_mapping.get(message.parentMessageId, NO_PARENT)
        id_mapping[message.messageId] = new_message_id
        cloned.append(
            message.model_copy(
                update={
                    "messageId": new_message_id,
                    "parentMessageId": parent_id,
                    "conversationId": conversation_id,
                    "user": user_id,
                },
                deep=True,
            )
        )

    logger.debug("Cloned %d messages into conversation %s", len(cloned), conversation_id)
    return cloned
