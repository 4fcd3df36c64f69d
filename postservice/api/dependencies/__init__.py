"""API dependencies for dependency injection."""

from postservice.api.dependencies.services import (
    get_container,
    get_health_service,
    get_metrics_collector,
    get_post_service,
)

__all__: list[str] = [
    "get_container",
    "get_health_service",
    "get_metrics_collector",
    "get_post_service",
]
