"""
Shared infrastructure for the RideChat core.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- exceptions: Base exception classes
- repository: Keyed entity storage base class
- locking: Per-entity write serialization
- events: Domain event base class and in-process event bus

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .exceptions import (
    RideChatError,
    NotFoundError,
    ValidationError,
    AuthorizationError,
    ConflictError,
)
from .events import DomainEvent, EventBus, ALL_EVENTS
from .locking import KeyedLock
from .repository import BaseRepository

__all__ = [
    "Settings",
    "get_settings",
    "RideChatError",
    "NotFoundError",
    "ValidationError",
    "AuthorizationError",
    "ConflictError",
    "DomainEvent",
    "EventBus",
    "ALL_EVENTS",
    "KeyedLock",
    "BaseRepository",
]
