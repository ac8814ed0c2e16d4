"""
Message domain events.
"""

from typing import Literal

from shared.events import DomainEvent

from .models import MessageKind


class MessageSent(DomainEvent):
    """Event: a message was delivered to a recipient."""

    event_type: Literal["message.sent"] = "message.sent"

    sender: str
    recipient: str
    content_ref: str
    kind: MessageKind
    message_id: str
    timestamp: int


class NewThreadMessage(DomainEvent):
    """Event: a thread received a new message."""

    event_type: Literal["message.new_in_thread"] = "message.new_in_thread"

    thread_id: str
    ride_id: str
    kind: MessageKind


class MessageExpired(DomainEvent):
    """Event: an expired message was removed."""

    event_type: Literal["message.expired"] = "message.expired"

    message_id: str
    timestamp: int
