"""
Threads module data models.

A thread is the conversation of one ride between exactly one driver and
one passenger. Participants and their roles never change.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ParticipantRole(str, Enum):
    """Role of a participant within a thread."""

    DRIVER = "driver"
    PASSENGER = "passenger"


class Thread(BaseModel):
    """A ride-scoped, two-participant conversation."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Thread ID (UUID)")
    ride_id: str = Field(..., min_length=1, description="Ride this thread belongs to")
    driver: str = Field(..., min_length=1, description="Driver handle")
    passenger: str = Field(..., min_length=1, description="Passenger handle")
    is_active: bool = Field(default=True, description="Whether the thread accepts messages")
    eta_minutes: int = Field(default=0, ge=0, description="Last known driver ETA in minutes")
    created_at: int = Field(..., ge=0, description="Creation time (ms since epoch)")
    closed_at: Optional[int] = Field(None, description="When the thread was deactivated")
    closed_by: Optional[str] = Field(None, description="Participant who deactivated it")

    @property
    def participants(self) -> tuple[str, str]:
        return (self.driver, self.passenger)

    def is_member(self, handle: str) -> bool:
        return handle == self.driver or handle == self.passenger

    def role_of(self, handle: str) -> Optional[ParticipantRole]:
        """Role of handle in this thread, or None for outsiders."""
        if handle == self.driver:
            return ParticipantRole.DRIVER
        if handle == self.passenger:
            return ParticipantRole.PASSENGER
        return None

    def other_participant(self, handle: str) -> str:
        """The participant on the other side of handle."""
        if handle == self.driver:
            return self.passenger
        if handle == self.passenger:
            return self.driver
        raise ValueError(f"{handle} is not a participant of thread {self.id}")
