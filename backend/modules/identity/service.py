"""
Identity registry service implementation.

Owns user registration, verification status and reputation. Every write is
serialized per handle and publishes its event only after the new record is
stored.
"""

import logging
from typing import Optional

from shared.config import Settings, get_settings
from shared.events import DomainEvent, EventBus
from shared.locking import KeyedLock

from .interfaces import IIdentityService
from .models import IdentityRecord, KYCStatus, Registry
from .repository import IdentityRepository
from .events import UserRegistered, KYCStatusUpdated
from .exceptions import (
    AlreadyRegisteredError,
    IdentityNotFoundError,
    InvalidStatusError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)


class IdentityService(IIdentityService):
    """
    Identity registry backed by an IdentityRepository.

    The Registry (admin handle and membership set) is created once at
    system start and passed in; the service never builds its own.
    """

    def __init__(
        self,
        registry: Registry,
        repository: Optional[IdentityRepository] = None,
        event_bus: Optional[EventBus] = None,
        settings: Optional[Settings] = None,
    ):
        self._registry = registry
        self._repo = repository or IdentityRepository()
        self._event_bus = event_bus
        self._settings = settings or get_settings()
        self._locks = KeyedLock()

    @property
    def admin(self) -> str:
        return self._registry.admin

    @property
    def registry(self) -> Registry:
        return self._registry

    async def register(
        self,
        handle: str,
        display_name: str,
        proof_ref: str,
        now: int,
    ) -> IdentityRecord:
        """Register a new user with status PENDING."""
        async with self._locks.hold(handle):
            if handle in self._registry or self._repo.exists(handle):
                logger.debug(f"Rejected duplicate registration for {handle}")
                raise AlreadyRegisteredError(handle)

            record = IdentityRecord(
                handle=handle,
                display_name=display_name,
                status=KYCStatus.PENDING,
                proofs=(proof_ref,),
                reputation=0,
                created_at=now,
                updated_at=now,
            )
            self._repo.save_record(record)
            self._registry.add(handle)

        logger.info(f"Registered identity {handle}")
        await self._emit(UserRegistered(
            handle=handle,
            proof_ref=proof_ref,
            name=display_name,
            timestamp=now,
        ))
        return record

    async def add_proof(
        self,
        handle: str,
        proof_ref: str,
        caller: str,
        now: int,
    ) -> IdentityRecord:
        """Append a proof reference; only the record owner may do this."""
        async with self._locks.hold(handle):
            record = self._require(handle)
            if caller != record.handle:
                logger.debug(f"{caller} tried to add a proof to {handle}")
                raise UnauthorizedError("add proofs for " + handle, caller)

            updated = record.model_copy(update={
                "proofs": record.proofs + (proof_ref,),
                "updated_at": now,
            })
            self._repo.save_record(updated)

        logger.debug(f"Proof added for {handle} ({len(updated.proofs)} total)")
        return updated

    async def update_status(
        self,
        handle: str,
        new_status: KYCStatus | str,
        caller: str,
        now: int,
    ) -> IdentityRecord:
        """Change verification status; only the registry admin may do this."""
        if not self._registry.is_admin(caller):
            logger.debug(f"Non-admin {caller} tried to change status of {handle}")
            raise UnauthorizedError("update verification status", caller)

        status = self._coerce_status(new_status)

        async with self._locks.hold(handle):
            record = self._require(handle)
            old_status = record.status
            updated = record.model_copy(update={"status": status, "updated_at": now})
            self._repo.save_record(updated)

        logger.info(
            f"Verification status of {handle} changed: "
            f"{old_status.value} -> {status.value}"
        )
        await self._emit(KYCStatusUpdated(
            handle=handle,
            old_status=old_status,
            new_status=status,
            timestamp=now,
        ))
        return updated

    async def adjust_reputation(
        self,
        handle: str,
        delta: int,
        now: int,
    ) -> IdentityRecord:
        """Add delta to reputation, clamped at zero. No upper bound."""
        async with self._locks.hold(handle):
            record = self._require(handle)
            reputation = max(0, record.reputation + delta)
            updated = record.model_copy(update={"reputation": reputation, "updated_at": now})
            self._repo.save_record(updated)

        logger.debug(f"Reputation of {handle} adjusted by {delta} to {reputation}")
        return updated

    async def get_status(self, handle: str) -> KYCStatus:
        return self._require(handle).status

    async def get_reputation(self, handle: str) -> int:
        return self._require(handle).reputation

    async def get_record(self, handle: str) -> Optional[IdentityRecord]:
        return self._repo.get_by_handle(handle)

    async def is_registered(self, handle: str) -> bool:
        return handle in self._registry

    async def list_by_status(self, status: KYCStatus | str) -> list[IdentityRecord]:
        """List records in a verification state (e.g. the pending review queue)."""
        return self._repo.list_by_status(self._coerce_status(status))

    def _require(self, handle: str) -> IdentityRecord:
        record = self._repo.get_by_handle(handle)
        if record is None:
            raise IdentityNotFoundError(handle)
        return record

    @staticmethod
    def _coerce_status(value: KYCStatus | str) -> KYCStatus:
        try:
            return KYCStatus(value)
        except ValueError:
            raise InvalidStatusError(value)

    async def _emit(self, event: DomainEvent) -> None:
        if self._event_bus is not None and self._settings.enable_event_publishing:
            await self._event_bus.publish(event)
