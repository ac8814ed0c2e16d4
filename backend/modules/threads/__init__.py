"""
Threads module.

Manages ride-scoped conversations between one driver and one passenger.

Public API:
- IThreadService: Interface for thread operations
- Thread, ParticipantRole: Thread models
- Thread exceptions: NotThreadMemberError, ThreadInactiveError, etc.
"""

from .interfaces import IThreadService
from .models import Thread, ParticipantRole
from .events import ThreadCreated, ThreadDeactivated
from .exceptions import (
    ThreadNotFoundError,
    NotThreadMemberError,
    ThreadInactiveError,
    InvalidParticipantsError,
    InvalidEtaError,
    DuplicateRideThreadError,
)

__all__ = [
    # Interface
    "IThreadService",
    # Models
    "Thread",
    "ParticipantRole",
    # Events
    "ThreadCreated",
    "ThreadDeactivated",
    # Exceptions
    "ThreadNotFoundError",
    "NotThreadMemberError",
    "ThreadInactiveError",
    "InvalidParticipantsError",
    "InvalidEtaError",
    "DuplicateRideThreadError",
]
