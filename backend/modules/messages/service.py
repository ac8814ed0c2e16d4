"""
Message store service implementation.

Creates, stores and retires messages. Thread posts are validated and
written while holding the thread's lock; events go out after the lock is
released so that handlers may post back into the same thread.
"""

import logging
import uuid
from typing import Optional

from shared.config import Settings, get_settings
from shared.events import DomainEvent, EventBus
from shared.locking import KeyedLock
from modules.identity.interfaces import IKycOracle
from modules.identity.gating import require_approved
from modules.threads.interfaces import IThreadService

from .interfaces import IMessageService
from .models import Message, MessageKind, TEMPLATE_KINDS, is_expired
from .repository import MessageRepository
from .events import MessageSent, NewThreadMessage, MessageExpired
from .exceptions import InvalidMessageKindError

logger = logging.getLogger(__name__)


class MessageService(IMessageService):
    """Message store backed by a MessageRepository."""

    def __init__(
        self,
        threads: IThreadService,
        kyc: IKycOracle,
        repository: Optional[MessageRepository] = None,
        event_bus: Optional[EventBus] = None,
        settings: Optional[Settings] = None,
    ):
        self._threads = threads
        self._kyc = kyc
        self._repo = repository or MessageRepository()
        self._event_bus = event_bus
        self._settings = settings or get_settings()
        self._locks = KeyedLock()

    async def send_direct(
        self,
        sender: str,
        recipient: str,
        kind: MessageKind | str,
        content_ref: str,
        now: int,
    ) -> Message:
        """Deliver a message outside any thread."""
        message = self._build(
            thread_id=None,
            sender=sender,
            recipient=recipient,
            kind=self._coerce_kind(kind),
            content_ref=content_ref,
            now=now,
        )
        self._repo.save_message(message)

        logger.debug(f"Direct message {message.id} sent from {sender} to {recipient}")
        await self._emit(self._sent_event(message))
        return message

    async def send_in_thread(
        self,
        thread_id: str,
        sender: str,
        content_ref: str,
        now: int,
        kind: MessageKind | str = MessageKind.RIDE,
    ) -> Message:
        """Post into a thread, addressed to the other participant."""
        message_kind = self._coerce_kind(kind)
        if message_kind in TEMPLATE_KINDS:
            raise InvalidMessageKindError(
                message_kind,
                "Template and quick-reply messages go through the template engine",
            )

        async with self._threads.lock(thread_id):
            thread = await self._threads.require_member(thread_id, sender)
            self._threads.require_active(thread)
            if sender == thread.driver:
                await require_approved(self._kyc, sender)

            message = self._build(
                thread_id=thread.id,
                sender=sender,
                recipient=thread.other_participant(sender),
                kind=message_kind,
                content_ref=content_ref,
                now=now,
            )
            self._repo.save_message(message)

        logger.debug(f"Message {message.id} posted in thread {thread_id} by {sender}")
        await self._emit(self._sent_event(message))
        await self._emit(NewThreadMessage(
            thread_id=thread.id,
            ride_id=thread.ride_id,
            kind=message_kind,
        ))
        return message

    async def broadcast(
        self,
        thread_id: str,
        sender: str,
        kind: MessageKind,
        content_ref: str,
        now: int,
        template_code: Optional[int] = None,
        is_template: bool = False,
    ) -> list[Message]:
        """Store one copy per participant; all copies or none."""
        message_kind = self._coerce_kind(kind)

        async with self._threads.lock(thread_id):
            thread = await self._threads.get_thread(thread_id)
            self._threads.require_active(thread)

            messages = [
                self._build(
                    thread_id=thread.id,
                    sender=sender,
                    recipient=recipient,
                    kind=message_kind,
                    content_ref=content_ref,
                    now=now,
                    template_code=template_code,
                    is_template=is_template,
                )
                for recipient in thread.participants
            ]
            self._repo.save_many(messages)

        logger.debug(
            f"Broadcast {message_kind.value} from {sender} in thread {thread_id} "
            f"({len(messages)} copies)"
        )
        for message in messages:
            await self._emit(self._sent_event(message))
        await self._emit(NewThreadMessage(
            thread_id=thread.id,
            ride_id=thread.ride_id,
            kind=message_kind,
        ))
        return messages

    async def expire(
        self,
        message_id: str,
        now: int,
        threshold_ms: Optional[int] = None,
    ) -> bool:
        """Delete a message older than the threshold; otherwise do nothing."""
        if threshold_ms is None:
            threshold_ms = self._settings.message_expiry_threshold_ms

        async with self._locks.hold(message_id):
            message = self._repo.get(message_id)
            if message is None or not is_expired(message, now, threshold_ms):
                return False
            self._repo.delete(message_id)

        logger.info(f"Message {message_id} expired")
        await self._emit(MessageExpired(message_id=message_id, timestamp=now))
        return True

    async def expire_all(self, now: int, threshold_ms: Optional[int] = None) -> int:
        """Run expire over every stored message. Returns the number removed."""
        removed = 0
        for message in self._repo.values():
            if await self.expire(message.id, now, threshold_ms):
                removed += 1
        return removed

    async def lookup(self, message_id: str) -> Optional[Message]:
        return self._repo.get(message_id)

    async def inbox(self, handle: str) -> list[Message]:
        return self._repo.list_for_recipient(handle)

    async def thread_history(self, thread_id: str, handle: str) -> list[Message]:
        """Messages addressed to handle plus the posts handle sent to the other side."""
        await self._threads.require_member(thread_id, handle)
        return [
            m for m in self._repo.list_for_thread(thread_id)
            if m.recipient == handle or (m.sender == handle and m.kind not in TEMPLATE_KINDS)
        ]

    def _build(
        self,
        thread_id: Optional[str],
        sender: str,
        recipient: str,
        kind: MessageKind,
        content_ref: str,
        now: int,
        template_code: Optional[int] = None,
        is_template: bool = False,
    ) -> Message:
        return Message(
            id=str(uuid.uuid4()),
            thread_id=thread_id,
            sender=sender,
            recipient=recipient,
            kind=kind,
            content_ref=content_ref,
            template_code=template_code,
            is_template=is_template,
            created_at=now,
        )

    @staticmethod
    def _coerce_kind(kind: MessageKind | str) -> MessageKind:
        try:
            return MessageKind(kind)
        except ValueError:
            raise InvalidMessageKindError(kind)

    @staticmethod
    def _sent_event(message: Message) -> MessageSent:
        return MessageSent(
            sender=message.sender,
            recipient=message.recipient,
            content_ref=message.content_ref,
            kind=message.kind,
            message_id=message.id,
            timestamp=message.created_at,
        )

    async def _emit(self, event: DomainEvent) -> None:
        if self._event_bus is not None and self._settings.enable_event_publishing:
            await self._event_bus.publish(event)
