"""
Identity module.

Handles user registration, verification (KYC) status and reputation.

Public API:
- IKycOracle: Status-only view used to gate driver actions
- IIdentityService: Interface for registry operations
- IdentityRecord, KYCStatus, Registry: Identity models
- Identity exceptions: AlreadyRegisteredError, KycRequiredError, etc.
"""

from .interfaces import IKycOracle, IIdentityService
from .models import IdentityRecord, KYCStatus, Registry
from .events import UserRegistered, KYCStatusUpdated
from .exceptions import (
    AlreadyRegisteredError,
    IdentityNotFoundError,
    UnauthorizedError,
    KycRequiredError,
    InvalidStatusError,
)

__all__ = [
    # Interfaces
    "IKycOracle",
    "IIdentityService",
    # Models
    "IdentityRecord",
    "KYCStatus",
    "Registry",
    # Events
    "UserRegistered",
    "KYCStatusUpdated",
    # Exceptions
    "AlreadyRegisteredError",
    "IdentityNotFoundError",
    "UnauthorizedError",
    "KycRequiredError",
    "InvalidStatusError",
]
