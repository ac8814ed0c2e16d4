"""
Acknowledgment tracker implementation.
"""

import logging
import uuid
from typing import Optional

from modules.messages.interfaces import IMessageService
from modules.messages.models import Message
from modules.messages.exceptions import MessageNotFoundError

from .interfaces import IAcknowledgmentService
from .models import ReadReceipt, DeliveryStatus, ReceiptStatus
from .repository import ReceiptRepository, DeliveryStatusRepository
from .exceptions import InvalidReceiptStatusError

logger = logging.getLogger(__name__)


class AcknowledgmentService(IAcknowledgmentService):
    """
    Records read receipts and delivery statuses.

    Depends on the message store for message identity only; no membership
    or role checks are made.
    """

    def __init__(
        self,
        messages: IMessageService,
        receipts: Optional[ReceiptRepository] = None,
        statuses: Optional[DeliveryStatusRepository] = None,
    ):
        self._messages = messages
        self._receipts = receipts or ReceiptRepository()
        self._statuses = statuses or DeliveryStatusRepository()

    async def acknowledge(self, message_id: str, reader: str, now: int) -> ReadReceipt:
        message = await self._require_message(message_id)
        receipt = self._receipts.add(ReadReceipt(
            id=str(uuid.uuid4()),
            message_id=message.id,
            reader=reader,
            addressed_to=message.sender,
            created_at=now,
        ))
        logger.debug(f"Message {message_id} acknowledged by {reader}")
        return receipt

    async def set_status(
        self,
        message_id: str,
        status: ReceiptStatus | str,
        reader: str,
        now: int,
    ) -> DeliveryStatus:
        try:
            receipt_status = ReceiptStatus(status)
        except ValueError:
            raise InvalidReceiptStatusError(status)

        message = await self._require_message(message_id)
        record = self._statuses.add(DeliveryStatus(
            id=str(uuid.uuid4()),
            message_id=message.id,
            reader=reader,
            status=receipt_status,
            created_at=now,
        ))
        logger.debug(f"Message {message_id} marked {receipt_status.value} for {reader}")
        return record

    async def receipts_for(self, message_id: str) -> list[ReadReceipt]:
        return self._receipts.list_for_message(message_id)

    async def status_history(self, message_id: str) -> list[DeliveryStatus]:
        return self._statuses.list_for_message(message_id)

    async def latest_status(self, message_id: str, reader: str) -> ReceiptStatus:
        history = [s for s in self._statuses.list_for_message(message_id) if s.reader == reader]
        if not history:
            return ReceiptStatus.UNREAD
        return history[-1].status

    async def _require_message(self, message_id: str) -> Message:
        message = await self._messages.lookup(message_id)
        if message is None:
            raise MessageNotFoundError(message_id)
        return message
