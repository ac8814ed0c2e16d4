"""
Per-passenger quick-reply allow-lists, keyed by passenger handle.
"""

from typing import Optional

from shared.repository import BaseRepository

from .models import QuickReply


class EnabledReplyRepository(BaseRepository[frozenset[QuickReply]]):
    """Repository for passengers' quick-reply allow-lists."""

    def get_for(self, passenger: str) -> Optional[frozenset[QuickReply]]:
        return self.get(passenger)

    def set_for(self, passenger: str, replies: frozenset[QuickReply]) -> frozenset[QuickReply]:
        return self.save(passenger, replies)
