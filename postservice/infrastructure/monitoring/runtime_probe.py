"""Process runtime probe.

Samples process memory, garbage collection runs and concurrent execution
units for the memory and task health checks.

Memory sources:
- Linux: /proc/self/statm (resident pages = allocated, total pages = reserved)
- Elsewhere: peak resident set size from getrusage for both figures
"""

from __future__ import annotations

import asyncio
import gc
import resource
import sys
import threading
from pathlib import Path

from postservice.application.ports.runtime_probe import (
    ConcurrencySnapshot,
    MemorySnapshot,
    RuntimeProbeProtocol,
)

STATM_PATH = Path("/proc/self/statm")


def _peak_rss_bytes() -> int:
    """Peak resident set size in bytes (ru_maxrss is KiB on Linux, bytes on macOS)."""
    peak = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    return peak if sys.platform == "darwin" else peak * 1024


class ProcessRuntimeProbe(RuntimeProbeProtocol):
    """Runtime probe reading counters of the current process."""

    def __init__(self, statm_path: Path = STATM_PATH) -> None:
        """Initialize the probe.

        Args:
            statm_path: Location of the statm file (overridable for tests).
        """
        self._statm_path = statm_path
        self._page_size = resource.getpagesize()

    def memory(self) -> MemorySnapshot:
        """Sample resident and virtual memory plus total GC runs."""
        allocated, reserved = self._read_memory()
        gc_collections = sum(stats["collections"] for stats in gc.get_stats())
        return MemorySnapshot(
            allocated_bytes=allocated,
            reserved_bytes=reserved,
            gc_collections=gc_collections,
        )

    def concurrency(self) -> ConcurrencySnapshot:
        """Count live threads and, inside a running loop, pending asyncio tasks."""
        try:
            tasks = len(asyncio.all_tasks())
        except RuntimeError:
            # No running event loop in this thread
            tasks = 0
        return ConcurrencySnapshot(
            threads=threading.active_count(),
            asyncio_tasks=tasks,
        )

    def _read_memory(self) -> tuple[int, int]:
        """Return (resident bytes, virtual bytes)."""
        try:
            fields = self._statm_path.read_text().split()
            return int(fields[1]) * self._page_size, int(fields[0]) * self._page_size
        except (OSError, ValueError, IndexError):
            peak = _peak_rss_bytes()
            return peak, peak
