"""
Conversation forking core.

This package contains transport-agnostic logic for forking chat
conversations: indexing a conversation's message tree, selecting which
messages a fork keeps, and copying them under new identities.
"""

from .constants import NO_PARENT
from .exceptions import CoreError, FetchError, InvalidOperationError, NotFoundError
from .models import Conversation, ForkOption, ForkResult, Message, gen_id
from .forking import build_forked_conversation, fork_conversation, save_fork
from .remap import clone_messages
from .selectors import (
    get_all_messages_up_to_parent,
    get_messages_for_conversation,
    get_messages_up_to_target_level,
    select_messages,
    split_at_target_level,
)
from .store import ConversationStore, InMemoryConversationStore
from .tree import MessageTree, format_message_tree

__all__ = [
    # Constants
    "NO_PARENT",
    # Exceptions
    "CoreError",
    "NotFoundError",
    "FetchError",
    "InvalidOperationError",
    # Models
    "Message",
    "Conversation",
    "ForkOption",
    "ForkResult",
    "gen_id",
    # Tree
    "MessageTree",
    "format_message_tree",
    # Selection
    "get_messages_for_conversation",
    "get_all_messages_up_to_parent",
    "get_messages_up_to_target_level",
    "split_at_target_level",
    "select_messages",
    # Remapping
    "clone_messages",
    # Persistence
    "ConversationStore",
    "InMemoryConversationStore",
    # Fork operations
    "fork_conversation",
    "build_forked_conversation",
    "save_fork",
]
