"""
Tests for the coroutine reader/writer lock.
"""

import asyncio

import pytest

from order_store_api.app.core.locks import ReadWriteLock

pytestmark = pytest.mark.asyncio


class TestReadWriteLock:
    async def test_readers_share_the_lock(self):
        lock = ReadWriteLock()
        async with lock.reader:
            async with lock.reader:
                assert lock.readers == 2
                assert not lock.write_locked
        assert lock.readers == 0

    async def test_writer_waits_for_readers(self):
        lock = ReadWriteLock()
        await lock.acquire_read()
        writer = asyncio.create_task(lock.acquire_write())
        await asyncio.sleep(0)
        assert not writer.done()

        lock.release_read()
        await asyncio.wait_for(writer, 1)
        assert lock.write_locked
        lock.release_write()
        assert not lock.write_locked

    async def test_reader_waits_for_writer(self):
        lock = ReadWriteLock()
        await lock.acquire_write()
        reader = asyncio.create_task(lock.acquire_read())
        await asyncio.sleep(0)
        assert not reader.done()

        lock.release_write()
        await asyncio.wait_for(reader, 1)
        assert lock.readers == 1

    async def test_waiting_writer_blocks_new_readers(self):
        lock = ReadWriteLock()
        await lock.acquire_read()
        writer = asyncio.create_task(lock.acquire_write())
        await asyncio.sleep(0)
        reader = asyncio.create_task(lock.acquire_read())
        await asyncio.sleep(0)
        assert not reader.done()

        lock.release_read()
        await asyncio.wait_for(writer, 1)
        await asyncio.sleep(0)
        assert not reader.done()

        lock.release_write()
        await asyncio.wait_for(reader, 1)
        assert lock.readers == 1

    async def test_cancelled_writer_lets_queued_readers_in(self):
        lock = ReadWriteLock()
        await lock.acquire_read()
        writer = asyncio.create_task(lock.acquire_write())
        await asyncio.sleep(0)
        reader = asyncio.create_task(lock.acquire_read())
        await asyncio.sleep(0)

        writer.cancel()
        with pytest.raises(asyncio.CancelledError):
            await writer
        await asyncio.wait_for(reader, 1)
        assert lock.readers == 2
        assert not lock.write_locked

    async def test_lock_is_released_when_body_raises(self):
        lock = ReadWriteLock()
        with pytest.raises(ValueError):
            async with lock.writer:
                raise ValueError("boom")
        assert not lock.write_locked
        async with lock.reader:
            assert lock.readers == 1

    async def test_writers_are_exclusive(self):
        lock = ReadWriteLock()
        inside = 0
        peak = 0

        async def write():
            nonlocal inside, peak
            async with lock.writer:
                inside += 1
                peak = max(peak, inside)
                await asyncio.sleep(0)
                inside -= 1

        await asyncio.gather(*(write() for _ in range(10)))
        assert peak == 1

    async def test_release_without_holding_raises(self):
        lock = ReadWriteLock()
        with pytest.raises(RuntimeError):
            lock.release_read()
        with pytest.raises(RuntimeError):
            lock.release_write()
