"""
Storage failures - Raised when the document store cannot complete an operation.
Maps to: HTTP 500 Internal Server Error

Driver errors (connection loss, timeouts, write errors) are wrapped into
StorageError at the store boundary, so callers never see driver-specific types.
"""

from typing import Optional


class StorageError(Exception):
    """A document store operation failed."""

    def __init__(self, operation: str, message: str = "Storage operation failed"):
        super().__init__(f"{operation}: {message}")
        self.operation = operation
        self.message = message


class FanOutError(StorageError):
    """
    The chat document was persisted but copying its summary to the members failed.

    The chat is left in place (no rollback) and is invisible through the
    per-user chat list until repaired.
    """

    def __init__(self, chat_id: str, cause: Optional[StorageError] = None):
        detail = cause.message if cause else "no member document was updated"
        super().__init__(
            "add_chat_summary_to_users",
            f"chat {chat_id} persisted but not linked to its members ({detail})",
        )
        self.chat_id = chat_id


class IdGenerationExhaustedError(StorageError):
    """A bounded retry policy gave up before finding a unique identifier."""

    def __init__(self, entity_kind: str, attempts: int):
        super().__init__(
            "generate_id",
            f"no unique {entity_kind} id after {attempts} attempts",
        )
        self.entity_kind = entity_kind
        self.attempts = attempts
