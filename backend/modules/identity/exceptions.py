"""
Identity module exceptions.

KycRequiredError lives here because every module that gates driver actions
on verification status raises it.
"""

from typing import Any

from shared.exceptions import (
    NotFoundError,
    ValidationError,
    AuthorizationError,
    ConflictError,
)


class AlreadyRegisteredError(ConflictError):
    """Raised when a handle is registered a second time."""

    def __init__(self, handle: str):
        super().__init__(
            f"Handle already registered: {handle}",
            code="ALREADY_REGISTERED",
            details={"handle": handle},
        )


class IdentityNotFoundError(NotFoundError):
    """Raised when a handle has no identity record."""

    def __init__(self, handle: str):
        super().__init__(
            f"Identity not found: {handle}",
            code="IDENTITY_NOT_FOUND",
            details={"handle": handle},
        )


class UnauthorizedError(AuthorizationError):
    """Raised when the caller lacks the role or ownership an action needs."""

    def __init__(self, action: str, caller: str):
        super().__init__(
            f"{caller} is not allowed to {action}",
            code="UNAUTHORIZED",
            details={"action": action, "caller": caller},
        )


class KycRequiredError(AuthorizationError):
    """Raised when an action requires an approved identity."""

    def __init__(self, handle: str, status: Any = None):
        details = {"handle": handle}
        if status is not None:
            details["status"] = getattr(status, "value", str(status))
        super().__init__(
            f"Identity verification required for {handle}",
            code="KYC_REQUIRED",
            details=details,
        )


class InvalidStatusError(ValidationError):
    """Raised when a status value is outside the verification states."""

    def __init__(self, value: Any):
        super().__init__(
            f"Invalid verification status: {value!r}",
            code="INVALID_STATUS",
            details={"value": str(value)},
        )
