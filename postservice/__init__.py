"""
postservice - Post CRUD and health-check HTTP service.

A small FastAPI service exposing create/read/update/delete operations over
posts, backed by either an in-memory store or PostgreSQL, together with
liveness, readiness and per-component health reporting.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
