"""
Receipt and delivery-status storage, keyed by record ID.
"""

from shared.repository import BaseRepository

from .models import ReadReceipt, DeliveryStatus


class ReceiptRepository(BaseRepository[ReadReceipt]):
    """Repository for read receipts."""

    def add(self, receipt: ReadReceipt) -> ReadReceipt:
        return self.save(receipt.id, receipt)

    def list_for_message(self, message_id: str) -> list[ReadReceipt]:
        receipts = [r for r in self.values() if r.message_id == message_id]
        return sorted(receipts, key=lambda r: r.created_at)


class DeliveryStatusRepository(BaseRepository[DeliveryStatus]):
    """Repository for delivery status events."""

    def add(self, status: DeliveryStatus) -> DeliveryStatus:
        return self.save(status.id, status)

    def list_for_message(self, message_id: str) -> list[DeliveryStatus]:
        # Stable sort keeps insertion order for events with the same timestamp
        statuses = [s for s in self.values() if s.message_id == message_id]
        return sorted(statuses, key=lambda s: s.created_at)
