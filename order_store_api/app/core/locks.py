"""
Reader/writer lock for coroutines.

``asyncio`` only ships an exclusive ``Lock``.  ``ReadWriteLock`` lets
any number of readers hold the lock together while a writer holds it
alone.  Writers that are waiting block newly arriving readers, so a
steady stream of reads cannot starve a write.

Usage::

    lock = ReadWriteLock()
    async with lock.reader:
        ...
    async with lock.writer:
        ...

Releasing never suspends, so a task cancelled inside the ``async
with`` body always gives the lock back.
"""

from __future__ import annotations

import asyncio
from collections import deque
from typing import Deque


class ReadWriteLock:
    """Writer‑preferring reader/writer lock for a single event loop."""

    def __init__(self) -> None:
        self._readers = 0
        self._writer = False
        self._read_waiters: Deque[asyncio.Future] = deque()
        self._write_waiters: Deque[asyncio.Future] = deque()
        self.reader = _ReaderSide(self)
        self.writer = _WriterSide(self)

    @property
    def readers(self) -> int:
        """Number of coroutines currently holding the read side."""
        return self._readers

    @property
    def write_locked(self) -> bool:
        return self._writer

    async def acquire_read(self) -> None:
        if not self._writer and not self._write_waiters:
            self._readers += 1
            return
        fut = asyncio.get_running_loop().create_future()
        self._read_waiters.append(fut)
        try:
            await fut
        except asyncio.CancelledError:
            if fut.done() and not fut.cancelled():
                # Granted just before the cancellation was delivered.
                self.release_read()
            elif fut in self._read_waiters:
                self._read_waiters.remove(fut)
            raise

    def release_read(self) -> None:
        if self._readers <= 0:
            raise RuntimeError("release_read() called without a reader holding the lock")
        self._readers -= 1
        self._wake()

    async def acquire_write(self) -> None:
        if not self._writer and self._readers == 0 and not self._write_waiters:
            self._writer = True
            return
        fut = asyncio.get_running_loop().create_future()
        self._write_waiters.append(fut)
        try:
            await fut
        except asyncio.CancelledError:
            if fut.done() and not fut.cancelled():
                self.release_write()
            else:
                if fut in self._write_waiters:
                    self._write_waiters.remove(fut)
                # Readers queued behind this writer may now proceed.
                self._wake()
            raise

    def release_write(self) -> None:
        if not self._writer:
            raise RuntimeError("release_write() called while the lock is not write-locked")
        self._writer = False
        self._wake()

    def _wake(self) -> None:
        if self._writer:
            return
        # Futures cancelled by their task are skipped; the task cleans up.
        while self._write_waiters and self._write_waiters[0].done():
            self._write_waiters.popleft()
        if self._write_waiters:
            if self._readers == 0:
                fut = self._write_waiters.popleft()
                self._writer = True
                fut.set_result(None)
            return
        while self._read_waiters:
            fut = self._read_waiters.popleft()
            if fut.done():
                continue
            self._readers += 1
            fut.set_result(None)


class _ReaderSide:
    def __init__(self, lock: ReadWriteLock) -> None:
        self._lock = lock

    async def __aenter__(self) -> None:
        await self._lock.acquire_read()

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self._lock.release_read()


class _WriterSide:
    def __init__(self, lock: ReadWriteLock) -> None:
        self._lock = lock

    async def __aenter__(self) -> None:
        await self._lock.acquire_write()

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self._lock.release_write()
