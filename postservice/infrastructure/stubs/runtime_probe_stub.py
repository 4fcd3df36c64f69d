"""Runtime probe stub for testing.

Implements RuntimeProbeProtocol with fixed, settable readings so the memory
and task ladders can be driven to every status deterministically.
"""

from __future__ import annotations

from postservice.application.ports.runtime_probe import (
    ConcurrencySnapshot,
    MemorySnapshot,
    RuntimeProbeProtocol,
)

_MB = 1024 * 1024


class RuntimeProbeStub(RuntimeProbeProtocol):
    """Stub implementation of RuntimeProbeProtocol.

    Defaults to 64MB allocated, 128MB reserved and 10 concurrent units.
    """

    def __init__(self) -> None:
        self._memory = MemorySnapshot(
            allocated_bytes=64 * _MB, reserved_bytes=128 * _MB, gc_collections=0
        )
        self._concurrency = ConcurrencySnapshot(threads=2, asyncio_tasks=8)

    def set_memory_mb(
        self, allocated_mb: int, reserved_mb: int | None = None, gc_collections: int = 0
    ) -> None:
        """Set the memory reading in whole megabytes."""
        reserved_mb = allocated_mb if reserved_mb is None else reserved_mb
        self._memory = MemorySnapshot(
            allocated_bytes=allocated_mb * _MB,
            reserved_bytes=reserved_mb * _MB,
            gc_collections=gc_collections,
        )

    def set_concurrency(self, threads: int, asyncio_tasks: int = 0) -> None:
        """Set the concurrent unit reading."""
        self._concurrency = ConcurrencySnapshot(
            threads=threads, asyncio_tasks=asyncio_tasks
        )

    def memory(self) -> MemorySnapshot:
        return self._memory

    def concurrency(self) -> ConcurrencySnapshot:
        return self._concurrency
