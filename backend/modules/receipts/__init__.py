"""
Receipts module.

Tracks read receipts and delivery status per message.

Public API:
- IAcknowledgmentService: Interface for acknowledgment tracking
- ReadReceipt, DeliveryStatus, ReceiptStatus: Receipt models
- InvalidReceiptStatusError
"""

from .interfaces import IAcknowledgmentService
from .models import ReadReceipt, DeliveryStatus, ReceiptStatus
from .exceptions import InvalidReceiptStatusError

__all__ = [
    # Interface
    "IAcknowledgmentService",
    # Models
    "ReadReceipt",
    "DeliveryStatus",
    "ReceiptStatus",
    # Exceptions
    "InvalidReceiptStatusError",
]
