"""
Thread storage, keyed by thread ID.
"""

from shared.repository import BaseRepository

from .models import Thread


class ThreadRepository(BaseRepository[Thread]):
    """Repository for ride threads."""

    def save_thread(self, thread: Thread) -> Thread:
        return self.save(thread.id, thread)

    def find_by_ride(self, ride_id: str) -> list[Thread]:
        """Threads opened for a ride, oldest first."""
        threads = [t for t in self.values() if t.ride_id == ride_id]
        return sorted(threads, key=lambda t: t.created_at)

    def find_by_participant(self, handle: str, active_only: bool = False) -> list[Thread]:
        """Threads a handle participates in, oldest first."""
        threads = [
            t for t in self.values()
            if t.is_member(handle) and (t.is_active or not active_only)
        ]
        return sorted(threads, key=lambda t: t.created_at)
