"""
Core constants for the conversation forker.

This module defines system-wide constants used across the codebase.
"""

# Parent id carried by root messages
NO_PARENT = "00000000-0000-0000-0000-000000000000"

DEFAULT_CONVERSATION_TITLE = "New Chat"

# Tree rendering connectors
BRANCH_CONNECTOR = "├── "
LAST_CONNECTOR = "└── "
