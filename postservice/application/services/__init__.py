"""Application services for postservice."""

from postservice.application.services.health_service import HealthService
from postservice.application.services.post_service import PostService

__all__: list[str] = ["HealthService", "PostService"]
