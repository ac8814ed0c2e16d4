"""
Identity module data models.

These models define the verification state of registered users and
the registry that owns them.
"""

from enum import Enum
from typing import Iterator

from pydantic import BaseModel, ConfigDict, Field


class KYCStatus(str, Enum):
    """Identity verification status."""

    PENDING = "pending"    # Registered, not yet reviewed
    APPROVED = "approved"  # Verified by the admin
    REJECTED = "rejected"  # Verification refused


class IdentityRecord(BaseModel):
    """
    One user's verification state and reputation.

    Records are immutable values. The identity service replaces the stored
    record on every change.
    """

    model_config = ConfigDict(frozen=True)

    handle: str = Field(..., min_length=1, description="Unique user handle")
    display_name: str = Field(..., description="Display name")
    status: KYCStatus = Field(default=KYCStatus.PENDING, description="Verification status")
    proofs: tuple[str, ...] = Field(
        default_factory=tuple,
        description="Submitted proof references, oldest first",
    )
    reputation: int = Field(default=0, ge=0, description="Reputation score")
    created_at: int = Field(..., ge=0, description="Registration time (ms since epoch)")
    updated_at: int = Field(..., ge=0, description="Last update time (ms since epoch)")

    @property
    def is_approved(self) -> bool:
        """Whether the user passed verification."""
        return self.status == KYCStatus.APPROVED


class Registry:
    """
    Membership set of registered handles plus the single admin identity.

    Constructed once at system start and injected into the identity service.
    The admin cannot change afterwards and membership only grows.
    """

    def __init__(self, admin: str) -> None:
        if not admin:
            raise ValueError("Registry admin handle must not be empty")
        self._admin = admin
        self._members: set[str] = set()

    @property
    def admin(self) -> str:
        """The admin identity allowed to change verification status."""
        return self._admin

    @property
    def members(self) -> frozenset[str]:
        return frozenset(self._members)

    def add(self, handle: str) -> None:
        self._members.add(handle)

    def is_admin(self, handle: str) -> bool:
        return handle == self._admin

    def __contains__(self, handle: object) -> bool:
        return handle in self._members

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._members))

    def __len__(self) -> int:
        return len(self._members)
