"""Runtime probe port.

Samples process-level counters: memory usage, garbage collection runs and
the number of concurrently executing units (OS threads and asyncio tasks).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class MemorySnapshot:
    """Process memory sample.

    Attributes:
        allocated_bytes: Memory currently in use by the process (resident).
        reserved_bytes: Total memory reserved from the OS (virtual size).
        gc_collections: Total garbage collection runs across generations.
    """

    allocated_bytes: int
    reserved_bytes: int
    gc_collections: int

    @property
    def allocated_mb(self) -> int:
        """Allocated memory in whole megabytes."""
        return self.allocated_bytes // (1024 * 1024)

    @property
    def reserved_mb(self) -> int:
        """Reserved memory in whole megabytes."""
        return self.reserved_bytes // (1024 * 1024)


@dataclass(frozen=True)
class ConcurrencySnapshot:
    """Count of concurrently executing units.

    Attributes:
        threads: Live OS threads.
        asyncio_tasks: Pending asyncio tasks on the running loop.
    """

    threads: int
    asyncio_tasks: int

    @property
    def total(self) -> int:
        """Threads plus asyncio tasks."""
        return self.threads + self.asyncio_tasks


class RuntimeProbeProtocol(Protocol):
    """Protocol for sampling runtime counters."""

    def memory(self) -> MemorySnapshot:
        """Sample process memory."""
        ...

    def concurrency(self) -> ConcurrencySnapshot:
        """Sample concurrent execution units."""
        ...
