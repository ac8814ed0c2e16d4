"""
Messages module.

Stores and retires individual messages, direct or within a ride thread.

Public API:
- IMessageService: Interface for message operations
- Message, MessageKind: Message models
- is_expired: Expiry predicate
- Message exceptions: MessageNotFoundError, InvalidMessageKindError
"""

from .interfaces import IMessageService
from .models import Message, MessageKind, TEMPLATE_KINDS, is_expired
from .events import MessageSent, NewThreadMessage, MessageExpired
from .exceptions import MessageNotFoundError, InvalidMessageKindError

__all__ = [
    # Interface
    "IMessageService",
    # Models
    "Message",
    "MessageKind",
    "TEMPLATE_KINDS",
    "is_expired",
    # Events
    "MessageSent",
    "NewThreadMessage",
    "MessageExpired",
    # Exceptions
    "MessageNotFoundError",
    "InvalidMessageKindError",
]
