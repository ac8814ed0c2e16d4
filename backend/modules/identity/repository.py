"""
Identity record storage, keyed by user handle.
"""

from typing import Optional

from shared.repository import BaseRepository

from .models import IdentityRecord, KYCStatus


class IdentityRepository(BaseRepository[IdentityRecord]):
    """Repository for identity records."""

    def get_by_handle(self, handle: str) -> Optional[IdentityRecord]:
        return self.get(handle)

    def save_record(self, record: IdentityRecord) -> IdentityRecord:
        return self.save(record.handle, record)

    def list_by_status(self, status: KYCStatus) -> list[IdentityRecord]:
        """List records in a verification state, ordered by registration time."""
        records = [r for r in self.values() if r.status == status]
        return sorted(records, key=lambda r: (r.created_at, r.handle))
