"""Database probe stub for testing.

Implements DatabaseProbeProtocol with injectable ping failures, ping delay
and pool statistics, so health checks can be exercised without PostgreSQL.
"""

from __future__ import annotations

import asyncio

from postservice.application.ports.database_probe import (
    DatabaseProbeProtocol,
    PoolStats,
)

DEFAULT_POOL_STATS = PoolStats(open_connections=1, in_use=0, idle=1, max_open=15)


class DatabaseProbeStub(DatabaseProbeProtocol):
    """Stub implementation of DatabaseProbeProtocol.

    Usage:
        probe = DatabaseProbeStub()
        probe.set_ping_error(ConnectionError("connection refused"))
        probe.set_pool_stats(None)  # pool cannot report stats

        probe.clear()  # back to a healthy database
    """

    def __init__(self) -> None:
        """Initialize the stub as a healthy, lightly used database."""
        self._ping_error: Exception | None = None
        self._ping_delay_seconds = 0.0
        self._pool_stats: PoolStats | None = DEFAULT_POOL_STATS
        self.ping_count = 0

    def set_ping_error(self, error: Exception | None) -> None:
        """Make ping raise this error (None restores success)."""
        self._ping_error = error

    def set_ping_delay(self, seconds: float) -> None:
        """Make ping sleep before answering."""
        self._ping_delay_seconds = seconds

    def set_pool_stats(self, stats: PoolStats | None) -> None:
        """Set the statistics returned by pool_stats."""
        self._pool_stats = stats

    def clear(self) -> None:
        """Reset all state for test isolation."""
        self._ping_error = None
        self._ping_delay_seconds = 0.0
        self._pool_stats = DEFAULT_POOL_STATS
        self.ping_count = 0

    async def ping(self) -> None:
        self.ping_count += 1
        if self._ping_delay_seconds:
            await asyncio.sleep(self._ping_delay_seconds)
        if self._ping_error is not None:
            raise self._ping_error

    def pool_stats(self) -> PoolStats | None:
        return self._pool_stats
