"""
Core domain exceptions.

These exceptions are transport-agnostic and should be caught by whatever
layer embeds the forker to convert into appropriate responses.
"""


class CoreError(Exception):
    """Base exception for all core errors."""

    pass


class NotFoundError(CoreError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class FetchError(CoreError):
    """Raised by a conversation store when reading from its backend fails."""

    pass


class InvalidOperationError(CoreError):
    """Raised when an operation cannot be performed with the given arguments."""

    pass
