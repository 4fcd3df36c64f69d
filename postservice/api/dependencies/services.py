"""Service dependencies for dependency injection.

Every dependency resolves from the ServiceContainer stored on
``app.state.container`` by create_app, so each app instance carries its own
object graph and tests swap implementations by building their own container.

Usage:
    from fastapi import Depends
    from postservice.api.dependencies import get_post_service

    @router.get("/posts")
    async def list_posts(service: PostService = Depends(get_post_service)):
        ...
"""

from fastapi import Request

from postservice.application.services.health_service import HealthService
from postservice.application.services.post_service import PostService
from postservice.bootstrap.container import ServiceContainer
from postservice.infrastructure.monitoring.metrics import MetricsCollector


def get_container(request: Request) -> ServiceContainer:
    """Get the container of the app serving this request."""
    return request.app.state.container


def get_post_service(request: Request) -> PostService:
    """Get the post service."""
    return get_container(request).post_service


def get_health_service(request: Request) -> HealthService:
    """Get the health service."""
    return get_container(request).health_service


def get_metrics_collector(request: Request) -> MetricsCollector:
    """Get the metrics collector."""
    return get_container(request).metrics
