"""
Domain models for the conversation forker.

These are the core data structures used throughout the application.
"""

from .conversation import Conversation
from .fork_option import ForkOption
from .fork_result import ForkResult
from .message import Message
from .utils import gen_id

__all__ = [
    # Utils
    "gen_id",
    # Records
    "Message",
    "Conversation",
    # Forking
    "ForkOption",
    "ForkResult",
]
