"""Tests for shared/locking.py."""

import asyncio

import pytest

from shared.locking import KeyedLock


class TestKeyedLock:
    @pytest.mark.asyncio
    async def test_hold_marks_key_locked(self):
        """A key should be locked only while held."""
        locks = KeyedLock()
        async with locks.hold("thread-1"):
            assert locks.is_locked("thread-1")
            assert not locks.is_locked("thread-2")
        assert not locks.is_locked("thread-1")

    @pytest.mark.asyncio
    async def test_same_key_is_serialized(self):
        """Two holders of one key should not overlap."""
        locks = KeyedLock()
        trace: list[str] = []

        async def worker(name: str) -> None:
            async with locks.hold("thread-1"):
                trace.append(f"{name}-in")
                await asyncio.sleep(0)
                trace.append(f"{name}-out")

        await asyncio.gather(worker("a"), worker("b"))
        assert trace == ["a-in", "a-out", "b-in", "b-out"]

    @pytest.mark.asyncio
    async def test_different_keys_run_in_parallel(self):
        """Holders of different keys should interleave freely."""
        locks = KeyedLock()
        trace: list[str] = []

        async def worker(key: str) -> None:
            async with locks.hold(key):
                trace.append(f"{key}-in")
                await asyncio.sleep(0)
                trace.append(f"{key}-out")

        await asyncio.gather(worker("a"), worker("b"))
        assert trace == ["a-in", "b-in", "a-out", "b-out"]

    @pytest.mark.asyncio
    async def test_lock_released_on_error(self):
        """An exception inside the block should release the key."""
        locks = KeyedLock()
        with pytest.raises(ValueError):
            async with locks.hold("thread-1"):
                raise ValueError("fail")
        assert not locks.is_locked("thread-1")

    @pytest.mark.asyncio
    async def test_released_keys_are_dropped(self):
        """No lock should remain once every holder has left."""
        locks = KeyedLock()
        for i in range(100):
            async with locks.hold(f"message-{i}"):
                assert len(locks) == 1
        assert len(locks) == 0

    @pytest.mark.asyncio
    async def test_waiter_keeps_key_alive(self):
        """A key stays while a waiter queues behind the holder."""
        locks = KeyedLock()
        seen: list[int] = []

        async def worker() -> None:
            async with locks.hold("thread-1"):
                seen.append(len(locks))
                await asyncio.sleep(0)

        await asyncio.gather(worker(), worker())
        assert seen == [1, 1]
        assert len(locks) == 0
