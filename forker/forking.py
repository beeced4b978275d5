"""
Conversation forking.

Provides fork_conversation, which copies a selection of an existing
conversation's messages into a new conversation, and save_fork, which
persists the result.
"""

import logging
import time

from .config import Config, get_config
from .exceptions import InvalidOperationError, NotFoundError
from .logging_config import log_timing, timed
from .models import Conversation, ForkOption, ForkResult, gen_id
from .remap import clone_messages
from .selectors import select_messages, split_at_target_level
from .store import ConversationStore
from .tree import MessageTree, format_message_tree

logger = logging.getLogger(__name__)


def build_forked_conversation(
    original: Conversation,
    conversation_id: str,
    user_id: str,
    fork_point: str,
    title: str | None = None,
    default_title: str | None = None,
) -> Conversation:
    """
    Derive the record of a forked conversation from the original.

    Metadata (endpoint, model settings, extra fields) is copied; identity,
    ownership, lineage and timestamps are replaced.
    """
    now = time.time()
    return original.model_copy(
        update={
            "conversationId": conversation_id,
            "title": title or original.title or default_title,
            "user": user_id,
            "parentConversationId": original.conversationId,
            "forkPoint": fork_point,
            "createdAt": now,
            "updatedAt": now,
        },
        deep=True,
    )


@timed("fork_conversation")
async def fork_conversation(
    store: ConversationStore,
    original_conversation_id: str,
    target_message_id: str,
    requesting_user_id: str,
    option: ForkOption | str | None = None,
    *,
    split_at_target: bool = False,
    latest_message_id: str | None = None,
    title: str | None = None,
    config: Config | None = None,
) -> ForkResult:
    """
    Fork a conversation at a specific message.

    Nothing is persisted; pass the result to save_fork to store it.

    Args:
        store: Store to read the original conversation from
        original_conversation_id: The conversation to fork
        target_message_id: The message the fork pivots on
        requesting_user_id: Owner of the new conversation
        option: Which messages to carry over (defaults to the configured option)
        split_at_target: Only keep the target's level and below, then select
            relative to `latest_message_id`
        latest_message_id: Latest message of the branch to keep when splitting
        title: Optional title for the new conversation
        config: Configuration (defaults to the loaded project config)

    Returns:
        The new conversation and its messages. The message list is empty when
        the target message does not exist.

    Raises:
        NotFoundError: If the original conversation is not found
        InvalidOperationError: If split_at_target is set without latest_message_id
    """
    config = config or get_config()
    fork_option = ForkOption.resolve(option, config.fork.default_option)

    if split_at_target and not latest_message_id:
        raise InvalidOperationError(
            "latest_message_id is required for splitting at the target message"
        )

    original = await store.fetch_conversation(original_conversation_id)
    if original is None:
        raise NotFoundError("Conversation", original_conversation_id)

    messages = await store.fetch_messages(original_conversation_id)

    pivot_id = target_message_id
    if split_at_target:
        messages = split_at_target_level(messages, target_message_id)
        pivot_id = latest_message_id

    with log_timing(logger, f"Select messages ({fork_option.value})"):
        selected = select_messages(MessageTree(messages), pivot_id, fork_option)

    new_conversation_id = gen_id()
    cloned = clone_messages(selected, new_conversation_id, requesting_user_id)
    conversation = build_forked_conversation(
        original,
        new_conversation_id,
        requesting_user_id,
        fork_point=pivot_id,
        title=title,
        default_title=config.fork.default_title,
    )

    logger.info(
        "Forked conversation %s -> %s at message %s (%s, %d messages)",
        original_conversation_id,
        new_conversation_id,
        pivot_id,
        fork_option.value,
        len(cloned),
    )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Fork tree:\n%s", format_message_tree(cloned))

    return ForkResult(conversation=conversation, messages=cloned)


async def save_fork(store: ConversationStore, result: ForkResult) -> ForkResult:
    """Persist a fork's conversation and messages."""
    await store.save_conversation(result.conversation)
    await store.save_messages(result.messages)
    return result
