"""
Infrastructure layer - External adapters for postservice.

This layer contains:
- Persistence adapters (in-memory map, PostgreSQL via SQLAlchemy)
- Database probe (reachability, pool statistics)
- Runtime probe and Prometheus metrics
- Structured logging and correlation ids
- Stubs for tests

IMPORT RULES:
- CAN import from: domain, application
- Implements ports defined in application layer
"""

__all__: list[str] = []
