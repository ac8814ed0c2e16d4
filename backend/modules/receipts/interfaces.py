"""
Receipts module interface.
"""

from typing import Protocol, runtime_checkable

from .models import ReadReceipt, DeliveryStatus, ReceiptStatus


@runtime_checkable
class IAcknowledgmentService(Protocol):
    """Interface for read receipts and delivery status tracking."""

    async def acknowledge(self, message_id: str, reader: str, now: int) -> ReadReceipt:
        """
        Record that reader read a message. The receipt is addressed back
        to the message's sender.

        Raises:
            MessageNotFoundError: If the message does not exist or has expired
        """
        ...

    async def set_status(
        self,
        message_id: str,
        status: ReceiptStatus | str,
        reader: str,
        now: int,
    ) -> DeliveryStatus:
        """
        Record a delivery status event. Any status may follow any other.

        Raises:
            InvalidReceiptStatusError: If status is not a ReceiptStatus
            MessageNotFoundError: If the message does not exist or has expired
        """
        ...

    async def receipts_for(self, message_id: str) -> list[ReadReceipt]:
        """Read receipts recorded for a message, oldest first."""
        ...

    async def status_history(self, message_id: str) -> list[DeliveryStatus]:
        """Delivery status events for a message, oldest first."""
        ...

    async def latest_status(self, message_id: str, reader: str) -> ReceiptStatus:
        """Most recent status for a reader, UNREAD if none was recorded."""
        ...
