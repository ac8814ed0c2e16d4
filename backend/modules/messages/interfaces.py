"""
Messages module interface.

The template engine and the acknowledgment tracker depend on
IMessageService, not the concrete implementation.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import Message, MessageKind


@runtime_checkable
class IMessageService(Protocol):
    """Interface for message storage and delivery."""

    async def send_direct(
        self,
        sender: str,
        recipient: str,
        kind: MessageKind | str,
        content_ref: str,
        now: int,
    ) -> Message:
        """
        Deliver a message outside any thread. No authorization is applied.

        Raises:
            InvalidMessageKindError: If kind is not a MessageKind
        """
        ...

    async def send_in_thread(
        self,
        thread_id: str,
        sender: str,
        content_ref: str,
        now: int,
        kind: MessageKind | str = MessageKind.RIDE,
    ) -> Message:
        """
        Post into a thread. The single message is addressed to the other
        participant.

        Raises:
            NotThreadMemberError: If sender is not a participant
            ThreadInactiveError: If the thread has been deactivated
            KycRequiredError: If sender is the driver and is not approved
            InvalidMessageKindError: For template kinds or unknown kinds
        """
        ...

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
        """
        Store one copy of a message per thread participant.

        Performs no authorization; callers validate first.

        Raises:
            ThreadInactiveError: If the thread has been deactivated
        """
        ...

    async def expire(
        self,
        message_id: str,
        now: int,
        threshold_ms: Optional[int] = None,
    ) -> bool:
        """
        Delete a message once it is older than the threshold.

        Returns:
            True if the message was deleted; False (a no-op) if it is still
            young enough or is already gone.
        """
        ...

    async def lookup(self, message_id: str) -> Optional[Message]:
        """Get a message, or None if it never existed or has expired."""
        ...

    async def inbox(self, handle: str) -> list[Message]:
        """Messages addressed to handle, oldest first."""
        ...

    async def thread_history(self, thread_id: str, handle: str) -> list[Message]:
        """
        A participant's view of a thread, oldest first.

        Raises:
            NotThreadMemberError: If handle is not a participant
        """
        ...
