"""
Message selection for forks.

Each selector takes the full message list of a conversation and a target
message id and returns the messages a fork should carry over. Every selector
emits a selected parent before any of its selected children, which is what
clone_messages relies on to rebuild parent links. A target that is not in the
list yields an empty selection.
"""

import logging
from collections.abc import Iterable

from .constants import NO_PARENT
from .models import ForkOption, Message
from .tree import MessageTree

logger = logging.getLogger(__name__)

MessagesInput = Iterable[Message] | MessageTree


def _as_tree(messages: MessagesInput) -> MessageTree:
    return messages if isinstance(messages, MessageTree) else MessageTree(messages)


def get_messages_for_conversation(
    messages: MessagesInput, parent_message_id: str
) -> list[Message]:
    """
    Direct path: the root-to-target chain, without siblings or descendants.

    Args:
        messages: The conversation's messages
        parent_message_id: The message the chain ends at

    Returns:
        Ancestors in root-to-target order, target included
    """
    tree = _as_tree(messages)
    return list(reversed(tree.ancestry(parent_message_id)))


def get_all_messages_up_to_parent(
    messages: MessagesInput, target_message_id: str
) -> list[Message]:
    """
    Include branches: the direct path plus every child of each ancestor.

    Siblings are taken without their own descendants, and nothing below the
    target is included. Other roots of the forest are left out.

    Args:
        messages: The conversation's messages
        target_message_id: The message the fork pivots on

    Returns:
        The path root first, then each ancestor's children in input order
    """
    tree = _as_tree(messages)
    path = list(reversed(tree.ancestry(target_message_id)))
    if not path:
        return []

    selected = [path[0]]
    seen = {path[0].messageId}
    for ancestor in path[:-1]:
        for child in tree.children_of(ancestor.messageId):
            if child.messageId in seen:
                continue
            seen.add(child.messageId)
            selected.append(child)

    return selected


def get_messages_up_to_target_level(
    messages: MessagesInput, target_message_id: str
) -> list[Message]:
    """
    Target level: every message at or above the target's depth, across all roots.

    Traverses breadth-first from every root and stops after the level the
    target sits on. When the target is caught in a rootless cycle (with or
    without other roots in the set) the traversal starts from the target.

    Args:
        messages: The conversation's messages
        target_message_id: The message whose level bounds the selection

    Returns:
        Messages level by level, input order within a level
    """
    tree = _as_tree(messages)
    target = tree.get(target_message_id)
    if target is None:
        return []

    # a target without a level sits in a rootless cycle; search from it instead
    current_level = [target] if tree.depth_of(target_message_id) is None else tree.roots()
    results: list[Message] = []
    seen: set[str] = set()
    for message in current_level:
        if message.messageId not in seen:
            seen.add(message.messageId)
            results.append(message)

    if tree.is_root(target):
        return results

    visited: set[str] = set()
    target_found = False
    while current_level and not target_found:
        next_level: list[Message] = []
        for node in current_level:
            if node.messageId in visited:
                continue
            visited.add(node.messageId)
            for child in tree.children_of(node.messageId):
                if child.messageId in seen:
                    logger.warning(
                        "Cycle detected at message %s, skipping", child.messageId
                    )
                    continue
                seen.add(child.messageId)
                results.append(child)
                next_level.append(child)
                if child.messageId == target_message_id:
                    target_found = True
        current_level = next_level

    return results


def split_at_target_level(
    messages: MessagesInput, target_message_id: str
) -> list[Message]:
    """
    Keep the target's generation and everything below it.

    Every message whose level is greater than or equal to the target's is
    kept; messages on the target's level become roots. The result is ordered
    by level, input order within a level. Returned messages are copies; the
    input is left untouched.

    Args:
        messages: The conversation's messages
        target_message_id: The message whose level is the split point

    Returns:
        The split-off messages, or an empty list if the target has no level
    """
    tree = _as_tree(messages)
    target_level = tree.depth_of(target_message_id)
    if target_level is None:
        return []

    kept: list[tuple[int, Message]] = []
    seen: set[str] = set()
    for message in tree.messages:
        level = tree.depth_of(message.messageId)
        if level is None or level < target_level or message.messageId in seen:
            continue
        seen.add(message.messageId)
        if level == target_level:
            message = message.model_copy(update={"parentMessageId": NO_PARENT})
        kept.append((level, message))

    kept.sort(key=lambda item: item[0])
    return [message for _, message in kept]


SELECTORS = {
    ForkOption.DIRECT_PATH: get_messages_for_conversation,
    ForkOption.INCLUDE_BRANCHES: get_all_messages_up_to_parent,
    ForkOption.TARGET_LEVEL: get_messages_up_to_target_level,
}


def select_messages(
    messages: MessagesInput, target_message_id: str, option: ForkOption
) -> list[Message]:
    """Run the selector registered for `option`."""
    return SELECTORS[option](messages, target_message_id)
