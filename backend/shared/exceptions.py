"""
Base exception classes for the RideChat core.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.
"""

from typing import Optional, Any


class RideChatError(Exception):
    """
    Base exception for all RideChat errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for callers that serialize errors."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(RideChatError):
    """Resource not found."""

    pass


class ValidationError(RideChatError):
    """Input validation failed."""

    pass


class AuthorizationError(RideChatError):
    """Authorization failed (caller lacks the required role or ownership)."""

    pass


class ConflictError(RideChatError):
    """Operation conflicts with existing state."""

    pass
