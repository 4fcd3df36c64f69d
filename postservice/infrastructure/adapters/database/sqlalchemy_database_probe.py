"""SQLAlchemy database probe.

Implements DatabaseProbeProtocol on top of an AsyncEngine: a ``SELECT 1``
round-trip for reachability and QueuePool counters for pool usage.
"""

from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.pool import QueuePool

from postservice.application.ports.database_probe import (
    DatabaseProbeProtocol,
    PoolStats,
)


class SqlAlchemyDatabaseProbe(DatabaseProbeProtocol):
    """Database probe backed by a SQLAlchemy async engine.

    Attributes:
        _engine: Engine whose pool is inspected.
        _max_overflow: Configured overflow, -1 for an unbounded pool.
    """

    def __init__(self, engine: AsyncEngine, max_overflow: int) -> None:
        """Initialize the probe.

        Args:
            engine: Engine to ping and inspect.
            max_overflow: Overflow the engine's pool was created with.
        """
        self._engine = engine
        self._max_overflow = max_overflow

    async def ping(self) -> None:
        """Round-trip ``SELECT 1`` on a pooled connection."""
        async with self._engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    def pool_stats(self) -> PoolStats | None:
        """Read QueuePool counters, None for pools that do not track them."""
        pool = self._engine.sync_engine.pool
        if not isinstance(pool, QueuePool):
            return None

        in_use = pool.checkedout()
        idle = pool.checkedin()
        max_open = 0 if self._max_overflow < 0 else pool.size() + self._max_overflow
        return PoolStats(
            open_connections=in_use + idle,
            in_use=in_use,
            idle=idle,
            max_open=max_open,
        )
