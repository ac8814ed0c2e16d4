"""
Identity module interface.

Other modules should depend on IKycOracle (or IIdentityService where they
need more than a status read), not the concrete implementation. Any external
verification authority that satisfies IKycOracle can replace the registry.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import IdentityRecord, KYCStatus


@runtime_checkable
class IKycOracle(Protocol):
    """Read-only view of identity verification status."""

    async def get_status(self, handle: str) -> KYCStatus:
        """
        Get the verification status of a handle.

        Raises:
            IdentityNotFoundError: If the handle is not registered
        """
        ...


@runtime_checkable
class IIdentityService(IKycOracle, Protocol):
    """
    Interface for identity registry operations.

    This protocol defines the contract that the identity module exposes
    to other modules.
    """

    @property
    def admin(self) -> str:
        """The registry's admin handle."""
        ...

    async def register(
        self,
        handle: str,
        display_name: str,
        proof_ref: str,
        now: int,
    ) -> IdentityRecord:
        """
        Register a new user with status PENDING and reputation 0.

        Args:
            handle: Unique user handle
            display_name: Name shown to other participants
            proof_ref: Reference to the first identity proof
            now: Current time (ms since epoch)

        Returns:
            The new IdentityRecord

        Raises:
            AlreadyRegisteredError: If the handle is already registered
        """
        ...

    async def add_proof(
        self,
        handle: str,
        proof_ref: str,
        caller: str,
        now: int,
    ) -> IdentityRecord:
        """
        Append a proof reference to the caller's own record.

        Raises:
            UnauthorizedError: If caller is not the record owner
            IdentityNotFoundError: If the handle is not registered
        """
        ...

    async def update_status(
        self,
        handle: str,
        new_status: KYCStatus | str,
        caller: str,
        now: int,
    ) -> IdentityRecord:
        """
        Change a user's verification status (admin only).

        Raises:
            UnauthorizedError: If caller is not the registry admin
            InvalidStatusError: If new_status is not a KYCStatus value
            IdentityNotFoundError: If the handle is not registered
        """
        ...

    async def adjust_reputation(
        self,
        handle: str,
        delta: int,
        now: int,
    ) -> IdentityRecord:
        """
        Add delta to a user's reputation, never going below zero.

        Raises:
            IdentityNotFoundError: If the handle is not registered
        """
        ...

    async def get_reputation(self, handle: str) -> int:
        """Get a user's reputation score."""
        ...

    async def get_record(self, handle: str) -> Optional[IdentityRecord]:
        """Get a user's identity record, or None if not registered."""
        ...

    async def is_registered(self, handle: str) -> bool:
        """Check whether a handle is registered."""
        ...
