"""Tests for the message store service."""

import pytest

from modules.identity.exceptions import KycRequiredError
from modules.messages.interfaces import IMessageService
from modules.messages.models import Message, MessageKind, is_expired
from modules.messages.events import MessageSent, NewThreadMessage, MessageExpired
from modules.messages.exceptions import InvalidMessageKindError
from modules.threads.exceptions import (
    ThreadNotFoundError,
    NotThreadMemberError,
    ThreadInactiveError,
)
from tests.conftest import DRIVER, PASSENGER, OUTSIDER, NOW, open_ride


DAY_MS = 24 * 60 * 60 * 1000


class TestIMessageService:
    def test_service_implements_interface(self, container):
        assert isinstance(container.messages, IMessageService)


class TestIsExpired:
    def test_threshold_is_exclusive(self):
        """A message exactly at the threshold age is not expired yet."""
        message = Message(
            id="m1",
            sender=DRIVER,
            recipient=PASSENGER,
            kind=MessageKind.RIDE,
            content_ref="ref",
            created_at=1000,
        )
        assert not is_expired(message, now=1500, threshold_ms=500)
        assert is_expired(message, now=1501, threshold_ms=500)
        assert message.is_direct


class TestSendDirect:
    @pytest.mark.asyncio
    async def test_send_direct(self, container, events):
        """Direct messages need no thread, registration or verification."""
        message = await container.messages.send_direct(
            "anyone", "someone", MessageKind.PAYMENT, "ref://pay", NOW,
        )

        assert message.thread_id is None
        assert message.kind == MessageKind.PAYMENT
        assert await container.messages.lookup(message.id) == message
        assert await container.messages.inbox("someone") == [message]

        assert len(events) == 1
        assert isinstance(events[0], MessageSent)
        assert events[0].message_id == message.id
        assert events[0].kind == MessageKind.PAYMENT

    @pytest.mark.asyncio
    async def test_unknown_kind(self, container):
        with pytest.raises(InvalidMessageKindError):
            await container.messages.send_direct("a", "b", "gossip", "ref", NOW)


class TestSendInThread:
    @pytest.mark.asyncio
    async def test_driver_post_reaches_passenger(self, container, events):
        """An approved driver's post should be addressed to the passenger."""
        thread = await open_ride(container)
        events.clear()

        message = await container.messages.send_in_thread(thread.id, DRIVER, "ref://hello", NOW + 1)

        assert message.thread_id == thread.id
        assert message.sender == DRIVER
        assert message.recipient == PASSENGER
        assert message.kind == MessageKind.RIDE
        assert message.is_template is False
        assert await container.messages.inbox(PASSENGER) == [message]

        assert [type(e) for e in events] == [MessageSent, NewThreadMessage]
        assert events[1].thread_id == thread.id
        assert events[1].ride_id == "ride-1"

    @pytest.mark.asyncio
    async def test_passenger_needs_no_verification(self, container):
        """Passengers may post while pending."""
        thread = await open_ride(container)
        message = await container.messages.send_in_thread(thread.id, PASSENGER, "ref://hi", NOW)
        assert message.recipient == DRIVER

    @pytest.mark.asyncio
    async def test_unapproved_driver_rejected(self, container, events):
        """A pending driver's post should be refused with nothing stored."""
        thread = await open_ride(container, driver_approved=False)
        published = len(events)

        with pytest.raises(KycRequiredError):
            await container.messages.send_in_thread(thread.id, DRIVER, "ref://hello", NOW)

        assert await container.messages.inbox(PASSENGER) == []
        assert len(events) == published

    @pytest.mark.asyncio
    async def test_outsider_rejected(self, container):
        thread = await open_ride(container)
        with pytest.raises(NotThreadMemberError):
            await container.messages.send_in_thread(thread.id, OUTSIDER, "ref://x", NOW)

    @pytest.mark.asyncio
    async def test_unknown_thread(self, container):
        with pytest.raises(ThreadNotFoundError):
            await container.messages.send_in_thread("missing", DRIVER, "ref://x", NOW)

    @pytest.mark.asyncio
    async def test_inactive_thread_rejected(self, container):
        """Closed threads should accept no more posts."""
        thread = await open_ride(container)
        await container.threads.deactivate(thread.id, PASSENGER, NOW)

        with pytest.raises(ThreadInactiveError):
            await container.messages.send_in_thread(thread.id, PASSENGER, "ref://x", NOW + 1)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("kind", [MessageKind.SUPPORT_TEMPLATE, MessageKind.QUICK_REPLY])
    async def test_template_kinds_rejected(self, container, kind):
        """Template kinds may only come from the template engine."""
        thread = await open_ride(container)
        with pytest.raises(InvalidMessageKindError):
            await container.messages.send_in_thread(thread.id, PASSENGER, "ref://x", NOW, kind=kind)

    @pytest.mark.asyncio
    async def test_other_kinds_allowed(self, container):
        thread = await open_ride(container)
        message = await container.messages.send_in_thread(
            thread.id, PASSENGER, "ref://paid", NOW, kind="payment",
        )
        assert message.kind == MessageKind.PAYMENT


class TestBroadcast:
    @pytest.mark.asyncio
    async def test_one_copy_per_participant(self, container, events):
        """A broadcast should store one message for each participant."""
        thread = await open_ride(container)
        events.clear()

        messages = await container.messages.broadcast(
            thread.id, DRIVER, MessageKind.SUPPORT_TEMPLATE, "text", NOW,
            template_code=1, is_template=True,
        )

        assert [m.recipient for m in messages] == [DRIVER, PASSENGER]
        assert all(m.template_code == 1 and m.is_template for m in messages)
        assert len({m.id for m in messages}) == 2

        sent = [e for e in events if isinstance(e, MessageSent)]
        notified = [e for e in events if isinstance(e, NewThreadMessage)]
        assert len(sent) == 2
        assert len(notified) == 1

    @pytest.mark.asyncio
    async def test_inactive_thread_stores_nothing(self, container):
        thread = await open_ride(container)
        await container.threads.deactivate(thread.id, DRIVER, NOW)

        with pytest.raises(ThreadInactiveError):
            await container.messages.broadcast(thread.id, DRIVER, MessageKind.RIDE, "text", NOW)

        assert await container.messages.inbox(DRIVER) == []
        assert await container.messages.inbox(PASSENGER) == []


class TestExpire:
    @pytest.mark.asyncio
    async def test_expire_old_message(self, container, events):
        """Messages older than the threshold should be removed."""
        message = await container.messages.send_direct("a", "b", "ride", "ref", NOW)

        removed = await container.messages.expire(message.id, NOW + 8 * DAY_MS)

        assert removed is True
        assert await container.messages.lookup(message.id) is None
        assert isinstance(events[-1], MessageExpired)
        assert events[-1].message_id == message.id

    @pytest.mark.asyncio
    async def test_young_message_kept(self, container):
        """Messages within the threshold should stay."""
        message = await container.messages.send_direct("a", "b", "ride", "ref", NOW)

        assert await container.messages.expire(message.id, NOW + 7 * DAY_MS) is False
        assert await container.messages.lookup(message.id) == message

    @pytest.mark.asyncio
    async def test_custom_threshold(self, container):
        message = await container.messages.send_direct("a", "b", "ride", "ref", NOW)
        assert await container.messages.expire(message.id, NOW + 11, threshold_ms=10) is True

    @pytest.mark.asyncio
    async def test_expire_is_idempotent(self, container, events):
        """Expiring a removed or unknown message should do nothing."""
        message = await container.messages.send_direct("a", "b", "ride", "ref", NOW)
        await container.messages.expire(message.id, NOW + 8 * DAY_MS)
        published = len(events)

        assert await container.messages.expire(message.id, NOW + 9 * DAY_MS) is False
        assert await container.messages.expire("missing", NOW) is False
        assert len(events) == published

    @pytest.mark.asyncio
    async def test_expire_leaves_no_locks_behind(self, container):
        """Expiring, including no-op calls, should not accumulate locks."""
        thread = await open_ride(container)
        for i in range(5):
            await container.messages.send_in_thread(thread.id, PASSENGER, f"ref://{i}", NOW + i)
        for i in range(10):
            await container.messages.expire(f"missing-{i}", NOW)

        assert await container.messages.expire_all(NOW + 100, threshold_ms=0) == 5
        assert len(container.messages._locks) == 0

    @pytest.mark.asyncio
    async def test_expire_all(self, container):
        """expire_all should sweep only old messages."""
        old = await container.messages.send_direct("a", "b", "ride", "old", NOW)
        fresh = await container.messages.send_direct("a", "b", "ride", "fresh", NOW + 5 * DAY_MS)

        removed = await container.messages.expire_all(NOW + 8 * DAY_MS)

        assert removed == 1
        assert await container.messages.lookup(old.id) is None
        assert await container.messages.lookup(fresh.id) == fresh


class TestThreadHistory:
    @pytest.mark.asyncio
    async def test_history_from_each_side(self, container):
        """Each participant should see their posts and what was sent to them."""
        thread = await open_ride(container)
        hello = await container.messages.send_in_thread(thread.id, DRIVER, "ref://hello", NOW + 1)
        reply = await container.messages.send_in_thread(thread.id, PASSENGER, "ref://hi", NOW + 2)
        template = await container.templates.send_driver_template(thread.id, 0, DRIVER, NOW + 3)

        driver_copy = next(m for m in template if m.recipient == DRIVER)
        passenger_copy = next(m for m in template if m.recipient == PASSENGER)

        driver_view = await container.messages.thread_history(thread.id, DRIVER)
        passenger_view = await container.messages.thread_history(thread.id, PASSENGER)

        assert driver_view == [hello, reply, driver_copy]
        assert passenger_view == [hello, reply, passenger_copy]

    @pytest.mark.asyncio
    async def test_outsider_cannot_read(self, container):
        thread = await open_ride(container)
        with pytest.raises(NotThreadMemberError):
            await container.messages.thread_history(thread.id, OUTSIDER)
