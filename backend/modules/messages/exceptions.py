"""
Messages module exceptions.
"""

from typing import Any

from shared.exceptions import NotFoundError, ValidationError


class MessageNotFoundError(NotFoundError):
    """Raised when a message does not exist (or has expired)."""

    def __init__(self, message_id: str):
        super().__init__(
            f"Message not found: {message_id}",
            code="MESSAGE_NOT_FOUND",
            details={"message_id": message_id},
        )


class InvalidMessageKindError(ValidationError):
    """Raised when a message kind is unknown or not allowed for the operation."""

    def __init__(self, kind: Any, reason: str = "Unknown message kind"):
        super().__init__(
            f"Invalid message kind: {kind!r}. {reason}",
            code="INVALID_MESSAGE_KIND",
            details={"kind": str(getattr(kind, "value", kind)), "reason": reason},
        )
