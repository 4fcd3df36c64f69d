"""Health check response models.

Bodies for /health, /health/live, /health/ready, /health/ping and
/health/component/{name}. Routes serialize them with
``response_model_exclude_none`` so unset optional fields are omitted.
"""

from pydantic import BaseModel, Field

from postservice.api.models.post import DateTimeWithZ
from postservice.application.dtos.health import (
    ComponentHealthDTO,
    HealthReportDTO,
    HealthStatus,
    LivenessReportDTO,
    ReadinessReportDTO,
)


class ComponentHealthResponse(BaseModel):
    """Health of one component.

    Attributes:
        name: Component name (database, memory, tasks).
        status: healthy, degraded or unhealthy.
        message: Human-readable summary.
        response_time_ms: Check duration in milliseconds.
        details: Key/value measurements.
        error: Failure description.
    """

    name: str
    status: HealthStatus
    message: str | None = None
    response_time_ms: int | None = None
    details: dict[str, str] | None = None
    error: str | None = None

    @classmethod
    def from_dto(cls, dto: ComponentHealthDTO) -> "ComponentHealthResponse":
        return cls(
            name=dto.name,
            status=dto.status,
            message=dto.message,
            response_time_ms=dto.response_time_ms,
            details=dict(dto.details) or None,
            error=dto.error,
        )


class HealthSummaryResponse(BaseModel):
    """Component counts by status."""

    total_components: int
    healthy: int
    degraded: int
    unhealthy: int


class HealthResponse(BaseModel):
    """Full health report."""

    status: HealthStatus = Field(description="Worst component status")
    timestamp: DateTimeWithZ
    version: str
    uptime_seconds: int = Field(ge=0, description="Seconds since service start")
    components: list[ComponentHealthResponse]
    summary: HealthSummaryResponse

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "healthy",
                    "timestamp": "2026-01-08T12:00:00Z",
                    "version": "1.0.0",
                    "uptime_seconds": 42,
                    "components": [
                        {
                            "name": "memory",
                            "status": "healthy",
                            "message": "Memory usage normal",
                            "response_time_ms": 0,
                            "details": {"alloc_mb": "48", "sys_mb": "310", "num_gc": "12"},
                        }
                    ],
                    "summary": {
                        "total_components": 1,
                        "healthy": 1,
                        "degraded": 0,
                        "unhealthy": 0,
                    },
                }
            ]
        }
    }

    @classmethod
    def from_dto(cls, dto: HealthReportDTO) -> "HealthResponse":
        return cls(
            status=dto.status,
            timestamp=dto.timestamp,
            version=dto.version,
            uptime_seconds=dto.uptime_seconds,
            components=[ComponentHealthResponse.from_dto(c) for c in dto.components],
            summary=HealthSummaryResponse(
                total_components=dto.summary.total_components,
                healthy=dto.summary.healthy,
                degraded=dto.summary.degraded,
                unhealthy=dto.summary.unhealthy,
            ),
        )


class LivenessResponse(BaseModel):
    """Liveness probe body."""

    status: HealthStatus
    timestamp: DateTimeWithZ
    message: str

    @classmethod
    def from_dto(cls, dto: LivenessReportDTO) -> "LivenessResponse":
        return cls(status=dto.status, timestamp=dto.timestamp, message=dto.message)


class ReadinessResponse(BaseModel):
    """Readiness probe body with the checked components."""

    status: HealthStatus
    timestamp: DateTimeWithZ
    message: str
    components: list[ComponentHealthResponse]

    @classmethod
    def from_dto(cls, dto: ReadinessReportDTO) -> "ReadinessResponse":
        return cls(
            status=dto.status,
            timestamp=dto.timestamp,
            message=dto.message,
            components=[ComponentHealthResponse.from_dto(c) for c in dto.components],
        )


class PingResponse(BaseModel):
    """Fixed ping body."""

    status: str = "ok"
    message: str = "Service is running"
