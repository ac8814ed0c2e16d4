"""
Per-key locks for serializing writes to a single entity.

Operations on the same thread or identity record must be applied one at a
time, while operations on different entities run freely in parallel.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator


class KeyedLock:
    """
    Hands out one asyncio.Lock per key.

    A key's lock exists only while some task holds or waits for it, so the
    map stays bounded by the number of in-flight operations.
    """

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}
        self._holders: dict[str, int] = {}

    @asynccontextmanager
    async def hold(self, key: str) -> AsyncIterator[None]:
        """Hold the lock for key for the duration of the block."""
        lock = self._locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[key] = lock
        self._holders[key] = self._holders.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._holders[key] -= 1
            if self._holders[key] == 0:
                del self._holders[key]
                del self._locks[key]

    def is_locked(self, key: str) -> bool:
        """Check whether key is currently held."""
        lock = self._locks.get(key)
        return lock is not None and lock.locked()

    def __len__(self) -> int:
        """Number of keys currently held or waited on."""
        return len(self._locks)
