"""
Message storage, keyed by message ID.
"""

from shared.repository import BaseRepository

from .models import Message


def _chronological(messages: list[Message]) -> list[Message]:
    return sorted(messages, key=lambda m: (m.created_at, m.id))


class MessageRepository(BaseRepository[Message]):
    """Repository for delivered messages."""

    def save_message(self, message: Message) -> Message:
        return self.save(message.id, message)

    def save_many(self, messages: list[Message]) -> list[Message]:
        for message in messages:
            self.save_message(message)
        return messages

    def list_for_recipient(self, handle: str) -> list[Message]:
        return _chronological([m for m in self.values() if m.recipient == handle])

    def list_for_thread(self, thread_id: str) -> list[Message]:
        return _chronological([m for m in self.values() if m.thread_id == thread_id])
