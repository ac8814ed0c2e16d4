"""
Domain events and the in-process event bus.

Services publish events after a state change has been persisted. Consumers
(indexers, notification services) subscribe by event type. Delivery is
at-most-once: each handler is awaited once per event and a failing handler
never affects the publisher or the other handlers.
"""

import logging
from typing import Awaitable, Callable
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class DomainEvent(BaseModel):
    """
    Base class for all domain events.

    Subclasses pin event_type with a Literal and add their payload fields.
    Events are immutable and JSON-serializable.
    """

    model_config = ConfigDict(frozen=True)

    event_id: str = Field(default_factory=lambda: str(uuid4()))
    event_type: str = ""

    def to_json(self) -> str:
        """Serialize the event to JSON."""
        return self.model_dump_json()

    @classmethod
    def from_json(cls, data: str | bytes) -> "DomainEvent":
        """Deserialize an event from JSON."""
        return cls.model_validate_json(data)


EventHandler = Callable[[DomainEvent], Awaitable[None]]

# Subscription key matching every event type
ALL_EVENTS = "*"


class EventBus:
    """
    In-process publish/subscribe bus.

    Handlers are awaited in subscription order. Exceptions raised by a
    handler are logged and dropped.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = {}

    def subscribe(self, event_type: str, handler: EventHandler) -> None:
        """
        Register a handler for an event type.

        Args:
            event_type: Event type string, or ALL_EVENTS for every event
            handler: Async callable receiving the event
        """
        if event_type not in self._handlers:
            self._handlers[event_type] = []
        self._handlers[event_type].append(handler)

    def subscribe_all(self, handler: EventHandler) -> None:
        """Register a handler for every event type."""
        self.subscribe(ALL_EVENTS, handler)

    def unsubscribe(self, event_type: str, handler: EventHandler) -> bool:
        """Remove a handler. Returns False if it was not registered."""
        handlers = self._handlers.get(event_type, [])
        if handler not in handlers:
            return False
        handlers.remove(handler)
        return True

    async def publish(self, event: DomainEvent) -> None:
        """Deliver an event once to every matching handler."""
        handlers = self._handlers.get(event.event_type, []) + self._handlers.get(ALL_EVENTS, [])
        for handler in list(handlers):
            try:
                await handler(event)
            except Exception:
                logger.exception(
                    f"Event handler {getattr(handler, '__name__', handler)!r} "
                    f"failed for {event.event_type} ({event.event_id})"
                )
