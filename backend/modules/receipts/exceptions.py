"""
Receipts module exceptions.
"""

from typing import Any

from shared.exceptions import ValidationError


class InvalidReceiptStatusError(ValidationError):
    """Raised when a delivery status is outside Unread/Delivered/Read."""

    def __init__(self, value: Any):
        super().__init__(
            f"Invalid delivery status: {value!r}",
            code="INVALID_RECEIPT_STATUS",
            details={"value": str(value)},
        )
