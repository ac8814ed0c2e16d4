"""
Template module interface.

The thread manager sends arrival templates through ITemplateService when
a driver updates the ETA.
"""

from typing import Iterable, Optional, Protocol, runtime_checkable

from modules.messages.models import Message

from .models import DriverTemplate, QuickReply


@runtime_checkable
class ITemplateService(Protocol):
    """Interface for driver templates and passenger quick replies."""

    async def send_driver_template(
        self,
        thread_id: str,
        template_code: DriverTemplate | int,
        driver: str,
        now: int,
    ) -> list[Message]:
        """
        Broadcast a driver template to both participants.

        Returns:
            Exactly two messages, one per participant

        Raises:
            InvalidTemplateError: If the code is not a driver template
            NotThreadMemberError: If driver is not a participant
            UnauthorizedError: If the caller is the thread's passenger
            ThreadInactiveError: If the thread has been deactivated
            KycRequiredError: If the driver is not approved
        """
        ...

    async def send_quick_reply(
        self,
        thread_id: str,
        reply_code: QuickReply | int,
        passenger: str,
        now: int,
        enabled_replies: Optional[Iterable[QuickReply | int]] = None,
    ) -> list[Message]:
        """
        Broadcast a passenger quick reply to both participants.

        Args:
            enabled_replies: Allow-list to check against. Defaults to the
                passenger's stored list, then the configured default.

        Returns:
            Exactly two messages, one per participant

        Raises:
            InvalidTemplateError: If the code, or any allow-list entry, is not a quick reply
            NotThreadMemberError: If passenger is not a participant
            UnauthorizedError: If the caller is the thread's driver
            ThreadInactiveError: If the thread has been deactivated
            ReplyNotEnabledError: If the reply is not in the allow-list
        """
        ...

    async def set_enabled_replies(
        self,
        passenger: str,
        replies: Iterable[QuickReply | int],
    ) -> frozenset[QuickReply]:
        """Store a passenger's quick-reply allow-list."""
        ...

    async def get_enabled_replies(self, passenger: str) -> frozenset[QuickReply]:
        """A passenger's effective quick-reply allow-list."""
        ...
