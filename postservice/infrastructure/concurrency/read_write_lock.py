"""Asyncio reader/writer lock.

Readers may hold the lock concurrently with each other; a writer holds it
exclusively. Once a writer is waiting, new readers queue behind it so a
steady stream of reads cannot starve writes.

Usage:
    lock = AsyncReadWriteLock()

    async with lock.read_locked():
        ...  # shared access

    async with lock.write_locked():
        ...  # exclusive access
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager


class AsyncReadWriteLock:
    """Writer-preferring reader/writer lock for coroutines on one event loop."""

    def __init__(self) -> None:
        self._condition = asyncio.Condition()
        self._readers = 0
        self._writer_active = False
        self._writers_waiting = 0

    @property
    def readers(self) -> int:
        """Number of coroutines currently holding the lock for reading."""
        return self._readers

    @property
    def writer_active(self) -> bool:
        """True while a writer holds the lock."""
        return self._writer_active

    async def acquire_read(self) -> None:
        """Acquire shared access, waiting for active and queued writers."""
        async with self._condition:
            await self._condition.wait_for(
                lambda: not self._writer_active and self._writers_waiting == 0
            )
            self._readers += 1

    async def release_read(self) -> None:
        """Release shared access."""
        async with self._condition:
            self._readers -= 1
            if self._readers == 0:
                self._condition.notify_all()

    async def acquire_write(self) -> None:
        """Acquire exclusive access, waiting for all readers and writers."""
        async with self._condition:
            self._writers_waiting += 1
            acquired = False
            try:
                await self._condition.wait_for(
                    lambda: not self._writer_active and self._readers == 0
                )
                self._writer_active = True
                acquired = True
            finally:
                self._writers_waiting -= 1
                if not acquired:
                    # Readers blocked behind this writer must re-check
                    self._condition.notify_all()

    async def release_write(self) -> None:
        """Release exclusive access."""
        async with self._condition:
            self._writer_active = False
            self._condition.notify_all()

    @asynccontextmanager
    async def read_locked(self) -> AsyncIterator[None]:
        """Hold the lock for reading for the duration of the block."""
        await self.acquire_read()
        try:
            yield
        finally:
            await self.release_read()

    @asynccontextmanager
    async def write_locked(self) -> AsyncIterator[None]:
        """Hold the lock for writing for the duration of the block."""
        await self.acquire_write()
        try:
            yield
        finally:
            await self.release_write()
