"""Application-layer DTOs.

These DTOs keep the application layer independent from the API layer.
API routes convert pydantic request models into these DTOs and map the
results back into pydantic response models.
"""

from postservice.application.dtos.health import (
    ComponentHealthDTO,
    HealthReportDTO,
    HealthStatus,
    HealthSummaryDTO,
    LivenessReportDTO,
    ReadinessReportDTO,
)
from postservice.application.dtos.post import CreatePostDTO, PostChanges

__all__: list[str] = [
    "ComponentHealthDTO",
    "CreatePostDTO",
    "HealthReportDTO",
    "HealthStatus",
    "HealthSummaryDTO",
    "LivenessReportDTO",
    "PostChanges",
    "ReadinessReportDTO",
]
