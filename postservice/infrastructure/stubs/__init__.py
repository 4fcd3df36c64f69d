"""Infrastructure stubs for development and testing.

Available stubs:
- DatabaseProbeStub: Injectable ping failures, delays and pool statistics
- RuntimeProbeStub: Settable memory and concurrency readings

WARNING: These stubs are NOT for production use.
Production implementations are in postservice/infrastructure/adapters/ and
postservice/infrastructure/monitoring/.
"""

from postservice.infrastructure.stubs.database_probe_stub import (
    DEFAULT_POOL_STATS,
    DatabaseProbeStub,
)
from postservice.infrastructure.stubs.runtime_probe_stub import RuntimeProbeStub

__all__: list[str] = [
    "DEFAULT_POOL_STATS",
    "DatabaseProbeStub",
    "RuntimeProbeStub",
]
