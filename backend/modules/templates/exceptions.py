"""
Template module exceptions.
"""

from typing import Any

from shared.exceptions import ValidationError


class InvalidTemplateError(ValidationError):
    """Raised when a code is outside its template or quick-reply set."""

    def __init__(self, code: Any, kind: str = "template"):
        super().__init__(
            f"Invalid {kind} code: {code!r}",
            code="INVALID_TEMPLATE",
            details={"template_code": str(code), "kind": kind},
        )


class ReplyNotEnabledError(ValidationError):
    """Raised when a passenger sends a quick reply outside their allow-list."""

    def __init__(self, reply_code: int, passenger: str):
        super().__init__(
            f"Quick reply {reply_code} is not enabled for {passenger}",
            code="REPLY_NOT_ENABLED",
            details={"reply_code": reply_code, "passenger": passenger},
        )
