"""Health check service.

Application service for liveness, readiness and per-component checks.

Requirements:
- Liveness: Is the process running? (always healthy while it responds)
- Readiness: Is the database reachable?
- Full health: database, memory and concurrent task count, aggregated
  to the worst component status with a per-status summary

Architecture Note:
This service uses application-layer DTOs (ComponentHealthDTO,
HealthReportDTO, ReadinessReportDTO) to avoid importing from the API layer.
The API routes are responsible for mapping these DTOs to Pydantic response
models and HTTP status codes.

Health-check failures are reported as data. No check raises to the caller;
an unexpected exception inside a checker becomes an UNHEALTHY component.
"""

from __future__ import annotations

import asyncio
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import datetime, timezone

from structlog import get_logger

from postservice.application.dtos.health import (
    ComponentHealthDTO,
    HealthReportDTO,
    HealthStatus,
    HealthSummaryDTO,
    LivenessReportDTO,
    ReadinessReportDTO,
)
from postservice.application.ports.database_probe import DatabaseProbeProtocol
from postservice.application.ports.runtime_probe import RuntimeProbeProtocol
from postservice.config.service_config import HealthThresholds

logger = get_logger()

DATABASE_COMPONENT = "database"
MEMORY_COMPONENT = "memory"
TASKS_COMPONENT = "tasks"

# Older clients ask for the task count as "goroutines"
COMPONENT_ALIASES = {"goroutines": TASKS_COMPONENT}

DEFAULT_PING_TIMEOUT_SECONDS = 5.0


def _utc_now() -> datetime:
    """Return current UTC time with timezone info."""
    return datetime.now(timezone.utc)


def _elapsed_ms(start_time: float) -> int:
    """Whole milliseconds elapsed since a perf_counter reading."""
    return int((time.perf_counter() - start_time) * 1000)


class ComponentChecker(ABC):
    """Abstract base class for component health checkers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Component name used in reports and lookups."""

    @abstractmethod
    async def check(self) -> ComponentHealthDTO:
        """Check component health.

        Returns:
            ComponentHealthDTO with health status.
        """


class DatabaseChecker(ComponentChecker):
    """Database connectivity checker.

    Pings through the injected probe with a bounded timeout, then classifies
    connection pool usage.
    """

    def __init__(
        self,
        probe: DatabaseProbeProtocol | None,
        thresholds: HealthThresholds,
        timeout_seconds: float = DEFAULT_PING_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize database checker.

        Args:
            probe: Database probe, or None when no connection exists.
            thresholds: Classification thresholds (pool ratio).
            timeout_seconds: Bound on the ping round-trip.
        """
        self._probe = probe
        self._thresholds = thresholds
        self._timeout_seconds = timeout_seconds

    @property
    def name(self) -> str:
        return DATABASE_COMPONENT

    async def check(self) -> ComponentHealthDTO:
        """Check database connectivity and pool usage.

        Returns:
            ComponentHealthDTO for the database.
        """
        if self._probe is None:
            return ComponentHealthDTO(
                name=self.name,
                status=HealthStatus.UNHEALTHY,
                error="Database connection not initialized",
            )

        start_time = time.perf_counter()
        try:
            await asyncio.wait_for(self._probe.ping(), timeout=self._timeout_seconds)
        except TimeoutError:
            return ComponentHealthDTO(
                name=self.name,
                status=HealthStatus.UNHEALTHY,
                response_time_ms=_elapsed_ms(start_time),
                error=(
                    "Database health check failed: "
                    f"ping timed out after {self._timeout_seconds}s"
                ),
            )
        except Exception as e:
            return ComponentHealthDTO(
                name=self.name,
                status=HealthStatus.UNHEALTHY,
                response_time_ms=_elapsed_ms(start_time),
                error=f"Database health check failed: {e}",
            )

        stats = self._probe.pool_stats()
        if stats is None:
            return ComponentHealthDTO(
                name=self.name,
                status=HealthStatus.DEGRADED,
                message="Could not get connection stats",
                response_time_ms=_elapsed_ms(start_time),
            )

        # Unbounded pools report no ratio and never count as saturated
        ratio = stats.usage_ratio()
        if ratio is not None and ratio > self._thresholds.db_pool_degraded_ratio:
            status = HealthStatus.DEGRADED
            message = "High connection usage detected"
        else:
            status = HealthStatus.HEALTHY
            message = "Database connection healthy"

        return ComponentHealthDTO(
            name=self.name,
            status=status,
            message=message,
            response_time_ms=_elapsed_ms(start_time),
            details=stats.as_details(),
        )


class MemoryChecker(ComponentChecker):
    """Process memory checker."""

    def __init__(
        self, probe: RuntimeProbeProtocol, thresholds: HealthThresholds
    ) -> None:
        self._probe = probe
        self._thresholds = thresholds

    @property
    def name(self) -> str:
        return MEMORY_COMPONENT

    async def check(self) -> ComponentHealthDTO:
        """Classify allocated memory against the memory ladder."""
        start_time = time.perf_counter()
        snapshot = self._probe.memory()
        allocated_mb = snapshot.allocated_mb

        if allocated_mb > self._thresholds.memory_unhealthy_mb:
            status = HealthStatus.UNHEALTHY
            message = "Critical memory usage"
        elif allocated_mb > self._thresholds.memory_degraded_mb:
            status = HealthStatus.DEGRADED
            message = "High memory usage detected"
        else:
            status = HealthStatus.HEALTHY
            message = "Memory usage normal"

        return ComponentHealthDTO(
            name=self.name,
            status=status,
            message=message,
            response_time_ms=_elapsed_ms(start_time),
            details={
                "alloc_mb": str(allocated_mb),
                "sys_mb": str(snapshot.reserved_mb),
                "num_gc": str(snapshot.gc_collections),
            },
        )


class TaskCountChecker(ComponentChecker):
    """Concurrent execution unit checker (OS threads + asyncio tasks)."""

    def __init__(
        self, probe: RuntimeProbeProtocol, thresholds: HealthThresholds
    ) -> None:
        self._probe = probe
        self._thresholds = thresholds

    @property
    def name(self) -> str:
        return TASKS_COMPONENT

    async def check(self) -> ComponentHealthDTO:
        """Classify the concurrent unit count against the task ladder."""
        start_time = time.perf_counter()
        snapshot = self._probe.concurrency()
        count = snapshot.total

        if count > self._thresholds.tasks_unhealthy:
            status = HealthStatus.UNHEALTHY
            message = "Critical task count"
        elif count > self._thresholds.tasks_degraded:
            status = HealthStatus.DEGRADED
            message = "High task count detected"
        else:
            status = HealthStatus.HEALTHY
            message = "Task count normal"

        return ComponentHealthDTO(
            name=self.name,
            status=status,
            message=message,
            response_time_ms=_elapsed_ms(start_time),
            details={
                "threads": str(snapshot.threads),
                "asyncio_tasks": str(snapshot.asyncio_tasks),
                "count": str(count),
            },
        )


class HealthService:
    """Service for health, liveness and readiness checks.

    Provides liveness and readiness checks for Kubernetes probes
    and a full component report for operational monitoring.

    Stateless aside from the version and start time captured at
    construction.
    """

    def __init__(
        self,
        version: str,
        runtime_probe: RuntimeProbeProtocol,
        database_probe: DatabaseProbeProtocol | None = None,
        thresholds: HealthThresholds | None = None,
        ping_timeout_seconds: float = DEFAULT_PING_TIMEOUT_SECONDS,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize health service.

        Args:
            version: Service version string reported by get_health.
            runtime_probe: Source of memory and concurrency counters.
            database_probe: Database probe, or None when no connection exists.
            thresholds: Classification thresholds (defaults if None).
            ping_timeout_seconds: Bound on the database ping.
            clock: Source of the current UTC time.
        """
        self._version = version
        self._clock = clock
        self._start_time = clock()
        thresholds = thresholds or HealthThresholds()
        self._database_checker = DatabaseChecker(
            database_probe, thresholds, timeout_seconds=ping_timeout_seconds
        )
        checkers: list[ComponentChecker] = [
            self._database_checker,
            MemoryChecker(runtime_probe, thresholds),
            TaskCountChecker(runtime_probe, thresholds),
        ]
        self._checkers: dict[str, ComponentChecker] = {c.name: c for c in checkers}
        self._log = logger.bind(service="HealthService", component="health")

    @property
    def version(self) -> str:
        """Service version string."""
        return self._version

    @property
    def start_time(self) -> datetime:
        """When this service was constructed (UTC)."""
        return self._start_time

    @property
    def component_names(self) -> list[str]:
        """Names of the checkable components, in check order."""
        return list(self._checkers)

    def has_component(self, name: str) -> bool:
        """Return True if a component with this name (or alias) can be checked."""
        return COMPONENT_ALIASES.get(name, name) in self._checkers

    async def get_health(self) -> HealthReportDTO:
        """Run every component check and aggregate.

        Returns:
            HealthReportDTO with overall status, uptime and summary.
        """
        timestamp = self._clock()
        components = [
            await self._run_checker(checker) for checker in self._checkers.values()
        ]
        status = HealthStatus.worst([c.status for c in components])
        uptime = int((timestamp - self._start_time).total_seconds())

        if status is not HealthStatus.HEALTHY:
            self._log.warning(
                "health_check_not_healthy",
                status=status.value,
                failing=[c.name for c in components if c.status is not HealthStatus.HEALTHY],
            )

        return HealthReportDTO(
            status=status,
            timestamp=timestamp,
            version=self._version,
            uptime_seconds=max(uptime, 0),
            components=components,
            summary=HealthSummaryDTO.from_components(components),
        )

    async def get_liveness(self) -> LivenessReportDTO:
        """Check service liveness.

        A process that can answer is alive, so this is always healthy.
        """
        return LivenessReportDTO(
            status=HealthStatus.HEALTHY,
            timestamp=self._clock(),
            message="Service is alive and responding",
        )

    async def get_readiness(self) -> ReadinessReportDTO:
        """Check service readiness against critical components (database).

        Returns:
            ReadinessReportDTO with status, message and checked components.
        """
        timestamp = self._clock()
        components = [await self._run_checker(self._database_checker)]
        status = HealthStatus.worst([c.status for c in components])

        if status is HealthStatus.UNHEALTHY:
            message = "Service is not ready - critical components unhealthy"
        elif status is HealthStatus.DEGRADED:
            message = "Service is partially ready - some components degraded"
        else:
            message = "Service is ready to accept requests"

        return ReadinessReportDTO(
            status=status,
            timestamp=timestamp,
            message=message,
            components=components,
        )

    async def check_component(self, name: str) -> ComponentHealthDTO:
        """Check a single component by name.

        Args:
            name: Component name (database, memory, tasks) or an alias
                from COMPONENT_ALIASES.

        Returns:
            The component's health. An unknown name yields an UNHEALTHY
            result with message "Unknown component" and no response time;
            use has_component to tell this case apart.
        """
        checker = self._checkers.get(COMPONENT_ALIASES.get(name, name))
        if checker is None:
            return ComponentHealthDTO(
                name=name,
                status=HealthStatus.UNHEALTHY,
                message="Unknown component",
                error="Component not found",
            )
        return await self._run_checker(checker)

    async def _run_checker(self, checker: ComponentChecker) -> ComponentHealthDTO:
        """Run a checker, converting unexpected exceptions into UNHEALTHY."""
        try:
            return await checker.check()
        except Exception as e:
            self._log.exception("health_checker_failed", checked=checker.name)
            return ComponentHealthDTO(
                name=checker.name,
                status=HealthStatus.UNHEALTHY,
                message="Health check raised an unexpected error",
                error=str(e),
            )
