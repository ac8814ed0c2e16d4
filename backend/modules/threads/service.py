"""
Thread manager service implementation.

Threads live in a keyed repository. Every write loads the thread by ID under
its lock, validates, stores a new copy and releases the lock before
publishing events.
"""

import logging
import uuid
from typing import AsyncContextManager, Optional, TYPE_CHECKING

from shared.config import Settings, get_settings
from shared.events import DomainEvent, EventBus
from shared.locking import KeyedLock
from modules.identity.interfaces import IKycOracle
from modules.identity.exceptions import KycRequiredError
from modules.identity.gating import require_approved
from modules.templates.catalog import template_for_eta

from .interfaces import IThreadService
from .models import Thread
from .repository import ThreadRepository
from .events import ThreadCreated, ThreadDeactivated
from .exceptions import (
    ThreadNotFoundError,
    NotThreadMemberError,
    ThreadInactiveError,
    InvalidParticipantsError,
    InvalidEtaError,
    DuplicateRideThreadError,
)

if TYPE_CHECKING:
    from modules.messages.models import Message
    from modules.templates.interfaces import ITemplateService

logger = logging.getLogger(__name__)


class ThreadService(IThreadService):
    """
    Thread manager with an in-process repository.

    The template service is attached after construction because it depends
    on this service in turn (see ServiceContainer).
    """

    def __init__(
        self,
        kyc: IKycOracle,
        repository: Optional[ThreadRepository] = None,
        event_bus: Optional[EventBus] = None,
        settings: Optional[Settings] = None,
        templates: Optional["ITemplateService"] = None,
    ):
        self._kyc = kyc
        self._repo = repository or ThreadRepository()
        self._event_bus = event_bus
        self._settings = settings or get_settings()
        self._templates = templates
        self._locks = KeyedLock()

    def attach_templates(self, templates: "ITemplateService") -> None:
        """Attach the template service used by update_eta."""
        self._templates = templates

    def lock(self, thread_id: str) -> AsyncContextManager[None]:
        return self._locks.hold(thread_id)

    async def create_thread(
        self,
        ride_id: str,
        driver: str,
        passenger: str,
        now: int,
    ) -> Thread:
        """Open a thread for a ride; the driver is the caller."""
        if driver == passenger:
            raise InvalidParticipantsError(driver, passenger)

        if self._settings.enforce_unique_ride_threads:
            existing = self._repo.find_by_ride(ride_id)
            if existing:
                raise DuplicateRideThreadError(ride_id, existing[0].id)

        thread = Thread(
            id=str(uuid.uuid4()),
            ride_id=ride_id,
            driver=driver,
            passenger=passenger,
            is_active=True,
            eta_minutes=0,
            created_at=now,
        )
        self._repo.save_thread(thread)

        logger.info(f"Thread {thread.id} opened for ride {ride_id}")
        await self._emit(ThreadCreated(
            thread_id=thread.id,
            ride_id=ride_id,
            driver=driver,
            passenger=passenger,
            timestamp=now,
        ))
        return thread

    async def get_thread(self, thread_id: str) -> Thread:
        thread = self._repo.get(thread_id)
        if thread is None:
            raise ThreadNotFoundError(thread_id)
        return thread

    async def find_by_ride(self, ride_id: str) -> list[Thread]:
        return self._repo.find_by_ride(ride_id)

    async def list_threads(self, handle: str, active_only: bool = False) -> list[Thread]:
        """Threads a handle participates in, oldest first."""
        return self._repo.find_by_participant(handle, active_only=active_only)

    async def is_member(self, thread_id: str, handle: str) -> bool:
        thread = await self.get_thread(thread_id)
        return thread.is_member(handle)

    async def require_member(self, thread_id: str, handle: str) -> Thread:
        thread = await self.get_thread(thread_id)
        if not thread.is_member(handle):
            logger.debug(f"{handle} rejected from thread {thread_id}: not a participant")
            raise NotThreadMemberError(thread_id, handle)
        return thread

    @staticmethod
    def require_active(thread: Thread) -> None:
        if not thread.is_active:
            raise ThreadInactiveError(thread.id)

    async def update_eta(
        self,
        thread_id: str,
        minutes_away: int,
        caller: str,
        now: int,
    ) -> list["Message"]:
        """Store the driver's ETA and send the matching arrival template."""
        if self._templates is None:
            raise RuntimeError("Template service is not attached to the thread service")

        async with self.lock(thread_id):
            thread = await self.get_thread(thread_id)
            if caller != thread.driver:
                raise KycRequiredError(caller)
            await require_approved(self._kyc, caller)
            if minutes_away < 0:
                raise InvalidEtaError(minutes_away)
            self.require_active(thread)

            self._repo.save_thread(thread.model_copy(update={"eta_minutes": minutes_away}))

        template = template_for_eta(minutes_away)
        logger.debug(f"ETA for thread {thread_id} set to {minutes_away} min ({template.name})")
        return await self._templates.send_driver_template(thread_id, template, caller, now)

    async def deactivate(self, thread_id: str, caller: str, now: int) -> Thread:
        """Close a thread; either participant may do this."""
        async with self.lock(thread_id):
            thread = await self.require_member(thread_id, caller)
            if not thread.is_active:
                return thread

            closed = thread.model_copy(update={
                "is_active": False,
                "closed_at": now,
                "closed_by": caller,
            })
            self._repo.save_thread(closed)

        logger.info(f"Thread {thread_id} closed by {caller}")
        await self._emit(ThreadDeactivated(
            thread_id=thread_id,
            ride_id=closed.ride_id,
            closed_by=caller,
            timestamp=now,
        ))
        return closed

    async def _emit(self, event: DomainEvent) -> None:
        if self._event_bus is not None and self._settings.enable_event_publishing:
            await self._event_bus.publish(event)
