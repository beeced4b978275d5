"""ID generation utility."""

import uuid


def gen_id() -> str:
    """Generate a fresh message or conversation id (uuid4 string)."""
    return str(uuid.uuid4())
