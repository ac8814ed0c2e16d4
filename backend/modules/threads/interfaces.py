"""
Threads module interface.

The message and template modules depend on IThreadService for thread
lookup, membership checks and per-thread write serialization.
"""

from typing import AsyncContextManager, Protocol, TYPE_CHECKING, runtime_checkable

from .models import Thread

if TYPE_CHECKING:
    from modules.messages.models import Message


@runtime_checkable
class IThreadService(Protocol):
    """Interface for ride thread operations."""

    def lock(self, thread_id: str) -> AsyncContextManager[None]:
        """
        Exclusive write access to one thread.

        Every operation that writes a thread, or writes messages into it,
        holds this lock for its load-validate-write step.
        """
        ...

    async def create_thread(
        self,
        ride_id: str,
        driver: str,
        passenger: str,
        now: int,
    ) -> Thread:
        """
        Open a thread for a ride. The driver is the caller.

        Raises:
            InvalidParticipantsError: If driver and passenger are the same handle
            DuplicateRideThreadError: If uniqueness per ride is enforced and
                the ride already has a thread
        """
        ...

    async def get_thread(self, thread_id: str) -> Thread:
        """
        Raises:
            ThreadNotFoundError: If the thread does not exist
        """
        ...

    async def is_member(self, thread_id: str, handle: str) -> bool:
        """Whether handle is the thread's driver or passenger."""
        ...

    async def require_member(self, thread_id: str, handle: str) -> Thread:
        """
        Get the thread, failing unless handle participates in it.

        Raises:
            NotThreadMemberError: If handle is not a participant
        """
        ...

    def require_active(self, thread: Thread) -> None:
        """
        Fail if the thread has been deactivated.

        Raises:
            ThreadInactiveError: If the thread is closed
        """
        ...

    async def update_eta(
        self,
        thread_id: str,
        minutes_away: int,
        caller: str,
        now: int,
    ) -> list["Message"]:
        """
        Store the driver's ETA and send the matching arrival template.

        Raises:
            KycRequiredError: Unless caller is the thread's approved driver
            InvalidEtaError: If minutes_away is negative
        """
        ...

    async def deactivate(self, thread_id: str, caller: str, now: int) -> Thread:
        """
        Close a thread. No further messages are accepted.

        Raises:
            NotThreadMemberError: If caller is not a participant
        """
        ...
