"""
Identity domain events.
"""

from typing import Literal

from shared.events import DomainEvent

from .models import KYCStatus


class UserRegistered(DomainEvent):
    """Event: a user registered with the identity registry."""

    event_type: Literal["identity.user_registered"] = "identity.user_registered"

    handle: str
    proof_ref: str
    name: str
    timestamp: int


class KYCStatusUpdated(DomainEvent):
    """Event: the admin changed a user's verification status."""

    event_type: Literal["identity.kyc_status_updated"] = "identity.kyc_status_updated"

    handle: str
    old_status: KYCStatus
    new_status: KYCStatus
    timestamp: int
