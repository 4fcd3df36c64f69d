"""Health check DTOs for application layer.

Application-layer DTOs for health check operations. These are used by
the HealthService and mapped to API Pydantic models by the routes.

Architecture Note:
Application layer defines its own DTOs to maintain independence
from the API layer. API routes convert these DTOs to Pydantic response models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class HealthStatus(str, Enum):
    """Health classification of a component or of the whole service.

    Severity order: UNHEALTHY > DEGRADED > HEALTHY.
    """

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"

    @property
    def severity(self) -> int:
        """Numeric severity, higher is worse."""
        return _SEVERITY[self]

    @classmethod
    def worst(cls, statuses: list[HealthStatus]) -> HealthStatus:
        """Return the most severe status, HEALTHY for an empty list.

        Args:
            statuses: Statuses to compare.

        Returns:
            The most severe status.
        """
        return max(statuses, key=lambda s: s.severity, default=cls.HEALTHY)


_SEVERITY: dict[HealthStatus, int] = {
    HealthStatus.HEALTHY: 0,
    HealthStatus.DEGRADED: 1,
    HealthStatus.UNHEALTHY: 2,
}


@dataclass(frozen=True)
class ComponentHealthDTO:
    """Health of a single checked component.

    Attributes:
        name: Component name (e.g., "database", "memory").
        status: Component health classification.
        message: Human-readable summary.
        response_time_ms: Check duration in milliseconds, None if not measured.
        details: Additional key/value measurements.
        error: Error text if the check failed.
    """

    name: str
    status: HealthStatus
    message: str | None = None
    response_time_ms: int | None = None
    details: dict[str, str] = field(default_factory=dict)
    error: str | None = None


@dataclass(frozen=True)
class HealthSummaryDTO:
    """Component counts by status.

    Attributes:
        total_components: Number of components checked.
        healthy: Number of healthy components.
        degraded: Number of degraded components.
        unhealthy: Number of unhealthy components.
    """

    total_components: int
    healthy: int
    degraded: int
    unhealthy: int

    @classmethod
    def from_components(
        cls, components: list[ComponentHealthDTO]
    ) -> HealthSummaryDTO:
        """Count components per status.

        Args:
            components: Checked components.

        Returns:
            Summary whose counts sum to the number of components.
        """
        statuses = [c.status for c in components]
        return cls(
            total_components=len(components),
            healthy=statuses.count(HealthStatus.HEALTHY),
            degraded=statuses.count(HealthStatus.DEGRADED),
            unhealthy=statuses.count(HealthStatus.UNHEALTHY),
        )


@dataclass(frozen=True)
class HealthReportDTO:
    """Full health report across all components.

    Attributes:
        status: Worst component status.
        timestamp: When the report was produced (UTC).
        version: Service version string.
        uptime_seconds: Whole seconds since the health service started.
        components: Checked components, in check order.
        summary: Component counts by status.
    """

    status: HealthStatus
    timestamp: datetime
    version: str
    uptime_seconds: int
    components: list[ComponentHealthDTO]
    summary: HealthSummaryDTO


@dataclass(frozen=True)
class LivenessReportDTO:
    """Liveness probe result.

    Attributes:
        status: Always HEALTHY while the process responds.
        timestamp: When the probe ran (UTC).
        message: Human-readable summary.
    """

    status: HealthStatus
    timestamp: datetime
    message: str


@dataclass(frozen=True)
class ReadinessReportDTO:
    """Readiness probe result.

    Attributes:
        status: Worst status among critical components.
        timestamp: When the probe ran (UTC).
        message: Human-readable summary.
        components: Critical components that were checked.
    """

    status: HealthStatus
    timestamp: datetime
    message: str
    components: list[ComponentHealthDTO] = field(default_factory=list)
