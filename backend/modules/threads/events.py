"""
Thread domain events.
"""

from typing import Literal

from shared.events import DomainEvent


class ThreadCreated(DomainEvent):
    """Event: a driver opened a thread for a ride."""

    event_type: Literal["thread.created"] = "thread.created"

    thread_id: str
    ride_id: str
    driver: str
    passenger: str
    timestamp: int


class ThreadDeactivated(DomainEvent):
    """Event: a participant closed a thread."""

    event_type: Literal["thread.deactivated"] = "thread.deactivated"

    thread_id: str
    ride_id: str
    closed_by: str
    timestamp: int
