"""Unit tests for AsyncReadWriteLock."""

import asyncio

import pytest

from postservice.infrastructure.concurrency import AsyncReadWriteLock


class TestAsyncReadWriteLock:
    """Tests for reader/writer exclusion."""

    @pytest.mark.asyncio
    async def test_readers_overlap(self) -> None:
        lock = AsyncReadWriteLock()
        both_inside = asyncio.Event()
        inside = 0

        async def reader() -> None:
            nonlocal inside
            async with lock.read_locked():
                inside += 1
                if inside == 2:
                    both_inside.set()
                await asyncio.wait_for(both_inside.wait(), timeout=1.0)

        await asyncio.gather(reader(), reader())

        assert lock.readers == 0

    @pytest.mark.asyncio
    async def test_writer_waits_for_reader(self) -> None:
        lock = AsyncReadWriteLock()
        order: list[str] = []

        await lock.acquire_read()
        writer = asyncio.create_task(self._write(lock, order))
        await asyncio.sleep(0.01)

        assert order == []
        assert not lock.writer_active

        order.append("read_done")
        await lock.release_read()
        await writer

        assert order == ["read_done", "write"]

    @pytest.mark.asyncio
    async def test_reader_waits_for_writer(self) -> None:
        lock = AsyncReadWriteLock()
        order: list[str] = []

        await lock.acquire_write()
        reader = asyncio.create_task(self._read(lock, order))
        await asyncio.sleep(0.01)

        assert order == []
        assert lock.writer_active

        order.append("write_done")
        await lock.release_write()
        await reader

        assert order == ["write_done", "read"]

    @pytest.mark.asyncio
    async def test_queued_writer_blocks_new_readers(self) -> None:
        lock = AsyncReadWriteLock()
        order: list[str] = []

        await lock.acquire_read()
        writer = asyncio.create_task(self._write(lock, order))
        await asyncio.sleep(0.01)
        late_reader = asyncio.create_task(self._read(lock, order))
        await asyncio.sleep(0.01)

        assert order == []

        await lock.release_read()
        await asyncio.gather(writer, late_reader)

        assert order == ["write", "read"]

    @pytest.mark.asyncio
    async def test_writers_are_exclusive(self) -> None:
        lock = AsyncReadWriteLock()
        active = 0
        peak = 0

        async def writer() -> None:
            nonlocal active, peak
            async with lock.write_locked():
                active += 1
                peak = max(peak, active)
                await asyncio.sleep(0.001)
                active -= 1

        await asyncio.gather(*(writer() for _ in range(10)))

        assert peak == 1
        assert not lock.writer_active

    @pytest.mark.asyncio
    async def test_cancelled_writer_releases_queued_readers(self) -> None:
        lock = AsyncReadWriteLock()
        order: list[str] = []

        await lock.acquire_read()
        writer = asyncio.create_task(self._write(lock, order))
        await asyncio.sleep(0.01)
        reader = asyncio.create_task(self._read(lock, order))
        await asyncio.sleep(0.01)

        writer.cancel()
        await asyncio.wait_for(reader, timeout=1.0)

        assert order == ["read"]
        await lock.release_read()

    @staticmethod
    async def _read(lock: AsyncReadWriteLock, order: list[str]) -> None:
        async with lock.read_locked():
            order.append("read")

    @staticmethod
    async def _write(lock: AsyncReadWriteLock, order: list[str]) -> None:
        async with lock.write_locked():
            order.append("write")
