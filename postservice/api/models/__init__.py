"""API request/response models."""

from postservice.api.models.health import (
    ComponentHealthResponse,
    HealthResponse,
    HealthSummaryResponse,
    LivenessResponse,
    PingResponse,
    ReadinessResponse,
)
from postservice.api.models.post import (
    CreatePostRequest,
    ErrorResponse,
    PostResponse,
    ProblemDetail,
    UpdatePostRequest,
)

__all__: list[str] = [
    "ComponentHealthResponse",
    "CreatePostRequest",
    "ErrorResponse",
    "HealthResponse",
    "HealthSummaryResponse",
    "LivenessResponse",
    "PingResponse",
    "PostResponse",
    "ProblemDetail",
    "ReadinessResponse",
    "UpdatePostRequest",
]
