"""
Application layer - Use cases and orchestration for postservice.

This layer contains:
- Application services (post CRUD orchestration, health checks)
- Port definitions (abstract interfaces for infrastructure)
- Application-layer DTOs

IMPORT RULES:
- CAN import from: domain
- CANNOT import from: infrastructure, api
"""

__all__: list[str] = []
