"""API route modules."""

from postservice.api.routes.health import probe_router as health_probe_router
from postservice.api.routes.health import router as health_router
from postservice.api.routes.metrics import router as metrics_router
from postservice.api.routes.posts import router as posts_router

__all__: list[str] = [
    "health_probe_router",
    "health_router",
    "metrics_router",
    "posts_router",
]
