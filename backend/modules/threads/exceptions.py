"""
Threads module exceptions.
"""

from shared.exceptions import (
    NotFoundError,
    ValidationError,
    AuthorizationError,
    ConflictError,
)


class ThreadNotFoundError(NotFoundError):
    """Raised when a thread is not found."""

    def __init__(self, thread_id: str):
        super().__init__(
            f"Thread not found: {thread_id}",
            code="THREAD_NOT_FOUND",
            details={"thread_id": thread_id},
        )


class NotThreadMemberError(AuthorizationError):
    """Raised when a handle acts on a thread it does not participate in."""

    def __init__(self, thread_id: str, handle: str):
        super().__init__(
            f"{handle} is not a participant of thread {thread_id}",
            code="NOT_THREAD_MEMBER",
            details={"thread_id": thread_id, "handle": handle},
        )


class ThreadInactiveError(ValidationError):
    """Raised when posting into a deactivated thread."""

    def __init__(self, thread_id: str):
        super().__init__(
            f"Thread is no longer active: {thread_id}",
            code="THREAD_INACTIVE",
            details={"thread_id": thread_id},
        )


class InvalidParticipantsError(ValidationError):
    """Raised when a thread would not have two distinct participants."""

    def __init__(self, driver: str, passenger: str):
        super().__init__(
            "A thread needs two distinct participants",
            code="INVALID_PARTICIPANTS",
            details={"driver": driver, "passenger": passenger},
        )


class InvalidEtaError(ValidationError):
    """Raised when an ETA value is negative."""

    def __init__(self, minutes_away: int):
        super().__init__(
            f"Invalid ETA: {minutes_away} minutes",
            code="INVALID_ETA",
            details={"minutes_away": minutes_away},
        )


class DuplicateRideThreadError(ConflictError):
    """Raised when a ride already has a thread and uniqueness is enforced."""

    def __init__(self, ride_id: str, thread_id: str):
        super().__init__(
            f"Ride {ride_id} already has thread {thread_id}",
            code="DUPLICATE_RIDE_THREAD",
            details={"ride_id": ride_id, "thread_id": thread_id},
        )
