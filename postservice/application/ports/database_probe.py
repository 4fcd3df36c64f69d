"""Database probe port.

Gives the health service a view of database reachability and connection
pool usage without depending on the database driver.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class PoolStats:
    """Connection pool statistics.

    Attributes:
        open_connections: Connections currently open (in use + idle).
        in_use: Connections checked out by callers.
        idle: Open connections waiting in the pool.
        max_open: Maximum connections the pool may open, 0 if unbounded.
    """

    open_connections: int
    in_use: int
    idle: int
    max_open: int

    def usage_ratio(self) -> float | None:
        """Fraction of max_open currently open, None when unbounded."""
        if self.max_open <= 0:
            return None
        return self.open_connections / self.max_open

    def as_details(self) -> dict[str, str]:
        """Render as string details for a component health report."""
        return {
            "open_connections": str(self.open_connections),
            "in_use": str(self.in_use),
            "idle": str(self.idle),
            "max_open": str(self.max_open),
        }


class DatabaseProbeProtocol(Protocol):
    """Protocol for database health probing."""

    async def ping(self) -> None:
        """Round-trip a trivial statement to the database.

        Raises:
            Exception: Any driver or connection error.
        """
        ...

    def pool_stats(self) -> PoolStats | None:
        """Return pool statistics, or None when the pool cannot report them."""
        ...
