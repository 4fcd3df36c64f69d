"""
API layer - FastAPI routes and HTTP concerns for postservice.

This layer contains:
- FastAPI app factory and route definitions
- Request/Response models
- HTTP middleware (logging, metrics)
- API versioning

IMPORT RULES:
- CAN import from: application, bootstrap
- Resolves services from the container on app.state
"""

__all__: list[str] = []
