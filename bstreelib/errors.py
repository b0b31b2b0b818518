"""Exceptions raised by BSTreeLib."""


class BSTError(Exception):
    """Base class for all BSTreeLib errors."""
    pass


class NodeAllocationError(BSTError, MemoryError):
    """Raised when a new node cannot be allocated.

    Subclasses MemoryError so callers that already guard against memory
    exhaustion keep working.
    """

    def __init__(self, key: int, message: str = "insufficient memory"):
        super().__init__(f"{message} (while creating node for key {key})")
        self.key = key


class ConfigurationError(BSTError, ValueError):
    """Raised when a TreeConfig fails validation."""

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__(f"Invalid configuration: {'; '.join(self.errors)}")
