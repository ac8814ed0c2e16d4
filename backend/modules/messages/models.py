"""
Messages module data models.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MessageKind(str, Enum):
    """What a message is about."""

    RIDE = "ride"
    PAYMENT = "payment"
    KYC = "kyc"
    SUPPORT_TEMPLATE = "support_template"
    QUICK_REPLY = "quick_reply"


# Kinds only the template engine may produce
TEMPLATE_KINDS = frozenset({MessageKind.SUPPORT_TEMPLATE, MessageKind.QUICK_REPLY})


class Message(BaseModel):
    """
    One delivered unit of communication.

    A message is addressed to exactly one recipient. Broadcasts into a
    thread are stored as one message per participant. Content is an opaque
    reference; the text itself lives outside the core.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Message ID (UUID)")
    thread_id: Optional[str] = Field(None, description="Owning thread, None for direct messages")
    sender: str = Field(..., description="Sender handle")
    recipient: str = Field(..., description="Recipient handle")
    kind: MessageKind = Field(..., description="Message kind")
    content_ref: str = Field(..., description="Opaque content reference")
    template_code: Optional[int] = Field(
        None,
        description="Template or quick-reply code (template kinds only)",
    )
    is_template: bool = Field(default=False, description="Sent from a driver template")
    created_at: int = Field(..., ge=0, description="Creation time (ms since epoch)")

    @property
    def is_direct(self) -> bool:
        return self.thread_id is None


def is_expired(message: Message, now: int, threshold_ms: int) -> bool:
    """Whether message is older than threshold_ms at time now."""
    return now - message.created_at > threshold_ms
