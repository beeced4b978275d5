"""
Message tree indexing.

Conversations are stored as flat message lists where each message points at
its parent. MessageTree builds the lookup structures every selector needs
once, and does every traversal behind a visited set so that dangling parents
and cyclic parent chains never hang or duplicate output.
"""

import logging
from collections.abc import Iterable, Sequence
from functools import cached_property

from .constants import BRANCH_CONNECTOR, LAST_CONNECTOR, NO_PARENT
from .models import Message

logger = logging.getLogger(__name__)


class MessageTree:
    """Parent/child index over a flat message list."""

    def __init__(self, messages: Iterable[Message]):
        self.messages: list[Message] = list(messages)
        self.by_id: dict[str, Message] = {}
        self.children: dict[str, list[Message]] = {}

        for message in self.messages:
            # first occurrence wins on duplicate ids
            self.by_id.setdefault(message.messageId, message)
            self.children.setdefault(message.parentMessageId, []).append(message)

    def __len__(self) -> int:
        return len(self.messages)

    def __contains__(self, message_id: object) -> bool:
        return message_id in self.by_id

    def get(self, message_id: str) -> Message | None:
        return self.by_id.get(message_id)

    def children_of(self, message_id: str) -> list[Message]:
        return self.children.get(message_id, [])

    def is_root(self, message: Message) -> bool:
        """A root either has no parent or points at a parent outside the set."""
        return message.is_root or message.parentMessageId not in self.by_id

    def roots(self) -> list[Message]:
        return [message for message in self.messages if self.is_root(message)]

    def ancestry(self, target_id: str) -> list[Message]:
        """
        Walk from the target up to its root.

        Args:
            target_id: The message to start from

        Returns:
            Messages in target-to-root order, or an empty list when the target
            is not part of the set
        """
        chain: list[Message] = []
        visited: set[str] = set()
        current = self.by_id.get(target_id)

        while current is not None:
            if current.messageId in visited:
                logger.warning(
                    "Cycle detected in parent chain of %s at %s", target_id, current.messageId
                )
                break
            visited.add(current.messageId)
            chain.append(current)
            if current.is_root:
                break
            current = self.by_id.get(current.parentMessageId)

        return chain

    @cached_property
    def levels(self) -> dict[str, int]:
        """
        Breadth-first depth of every message reachable from a root.

        Messages that are only reachable through a rootless cycle get no level.
        """
        levels: dict[str, int] = {}
        current_level = self.roots()
        depth = 0

        while current_level:
            next_level: list[Message] = []
            for node in current_level:
                if node.messageId in levels:
                    continue
                levels[node.messageId] = depth
                next_level.extend(self.children_of(node.messageId))
            current_level = next_level
            depth += 1

        return levels

    def depth_of(self, message_id: str) -> int | None:
        return self.levels.get(message_id)


def format_message_tree(
    messages: Sequence[Message], parent_id: str = NO_PARENT, prefix: str = ""
) -> str:
    """
    Render messages as an indented ASCII tree, one line per message.

    Used for debug logging; messages outside the tree hanging off `parent_id`
    are not rendered.
    """
    tree = MessageTree(messages)
    lines: list[str] = []
    visited: set[str] = set()

    def walk(node_id: str, indent: str) -> None:
        children = [c for c in tree.children_of(node_id) if c.messageId not in visited]
        for index, child in enumerate(children):
            visited.add(child.messageId)
            is_last = index == len(children) - 1
            connector = LAST_CONNECTOR if is_last else BRANCH_CONNECTOR
            label = "Root" if child.is_root else f"Child of {child.parentMessageId}"
            lines.append(f"{indent}{connector}[{child.messageId}]: {label}")
            walk(child.messageId, indent + ("    " if is_last else "|   "))

    walk(parent_id, prefix)
    return "\n".join(lines)
