"""
Receipts module data models.

Receipts and delivery statuses are append-only: every acknowledgment or
status event creates a new record and none is ever changed.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ReceiptStatus(str, Enum):
    """Delivery state of a message as seen by one reader."""

    UNREAD = "unread"
    DELIVERED = "delivered"
    READ = "read"


class ReadReceipt(BaseModel):
    """Acknowledgment that a reader read a message, addressed to its sender."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Receipt ID (UUID)")
    message_id: str = Field(..., description="Acknowledged message")
    reader: str = Field(..., description="Handle that read the message")
    addressed_to: str = Field(..., description="Original sender of the message")
    created_at: int = Field(..., ge=0, description="Acknowledgment time (ms since epoch)")


class DeliveryStatus(BaseModel):
    """One status event for a message and reader."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Status record ID (UUID)")
    message_id: str = Field(..., description="Message the status refers to")
    reader: str = Field(..., description="Handle the status applies to")
    status: ReceiptStatus = Field(..., description="Reported status")
    created_at: int = Field(..., ge=0, description="Event time (ms since epoch)")
