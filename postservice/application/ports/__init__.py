"""Application ports - Abstract interfaces for infrastructure adapters.

This module defines the contracts that infrastructure adapters must implement.
Ports enable dependency inversion and make the application layer testable.

Available ports:
- PostRepositoryProtocol: Post persistence (in-memory or relational)
- DatabaseProbeProtocol: Database reachability and pool statistics
- RuntimeProbeProtocol: Process memory and concurrency counters
"""

from postservice.application.ports.database_probe import (
    DatabaseProbeProtocol,
    PoolStats,
)
from postservice.application.ports.post_repository import PostRepositoryProtocol
from postservice.application.ports.runtime_probe import (
    ConcurrencySnapshot,
    MemorySnapshot,
    RuntimeProbeProtocol,
)

__all__: list[str] = [
    "ConcurrencySnapshot",
    "DatabaseProbeProtocol",
    "MemorySnapshot",
    "PoolStats",
    "PostRepositoryProtocol",
    "RuntimeProbeProtocol",
]
