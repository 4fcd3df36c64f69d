"""Service container: the object graph for one application instance.

build_container wires repositories, probes and services from ServiceConfig.
The resulting ServiceContainer is stored on ``app.state.container``; route
dependencies read it from there, so two apps built in one process never
share state.

Storage Backends:
- memory: InMemoryPostRepository, no database probe (database component
  reports UNHEALTHY "Database connection not initialized")
- postgres: SqlAlchemyPostRepository over an asyncpg engine, probed by
  SqlAlchemyDatabaseProbe
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from postservice.application.ports.database_probe import DatabaseProbeProtocol
from postservice.application.ports.post_repository import PostRepositoryProtocol
from postservice.application.ports.runtime_probe import RuntimeProbeProtocol
from postservice.application.services.health_service import HealthService
from postservice.application.services.post_service import PostService
from postservice.bootstrap.database import (
    create_database_engine,
    create_session_factory,
)
from postservice.config.service_config import ServiceConfig
from postservice.infrastructure.adapters.database import SqlAlchemyDatabaseProbe
from postservice.infrastructure.adapters.persistence import (
    InMemoryPostRepository,
    SqlAlchemyPostRepository,
    create_post_schema,
)
from postservice.infrastructure.monitoring import MetricsCollector, ProcessRuntimeProbe
from postservice.infrastructure.observability import get_logger_for_service


async def _check_connectivity(engine: AsyncEngine) -> None:
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


@dataclass
class ServiceContainer:
    """Wired services and the resources they hold.

    Attributes:
        config: Configuration the container was built from.
        repository: Post storage implementation.
        post_service: Post CRUD service.
        health_service: Health, liveness and readiness service.
        metrics: Prometheus metrics collector with its own registry.
        engine: Database engine (postgres backend only).
    """

    config: ServiceConfig
    repository: PostRepositoryProtocol
    post_service: PostService
    health_service: HealthService
    metrics: MetricsCollector
    engine: AsyncEngine | None = None

    async def startup(self) -> None:
        """Prepare resources before serving requests.

        With a database: verifies it answers ``SELECT 1`` within
        db_ping_timeout_seconds, then creates the posts schema when
        configured. Finally records the start.

        Raises:
            Exception: Database unreachable or schema creation failed (the
                service must not start).
        """
        log = get_logger_for_service(
            self.config.service_name, component="container"
        ).bind(storage=self.config.storage_backend)
        if self.engine is not None:
            await asyncio.wait_for(
                _check_connectivity(self.engine),
                timeout=self.config.db_ping_timeout_seconds,
            )
            log.info("database_reachable")
            if self.config.auto_create_schema:
                await create_post_schema(self.engine)
                log.info("post_schema_ready")
        self.metrics.record_startup()
        log.info("service_container_started")

    async def shutdown(self) -> None:
        """Release held resources (closes the database pool)."""
        if self.engine is not None:
            await self.engine.dispose()
            get_logger_for_service(
                self.config.service_name, component="container"
            ).info("database_engine_disposed")


def build_container(
    config: ServiceConfig,
    *,
    repository: PostRepositoryProtocol | None = None,
    database_probe: DatabaseProbeProtocol | None = None,
    runtime_probe: RuntimeProbeProtocol | None = None,
    metrics: MetricsCollector | None = None,
) -> ServiceContainer:
    """Build the container for a configuration.

    Keyword arguments override the pieces the configuration would otherwise
    create (used by tests to inject stubs).

    Args:
        config: Service configuration.
        repository: Post repository override.
        database_probe: Database probe override.
        runtime_probe: Runtime probe override.
        metrics: Metrics collector override.

    Returns:
        A wired ServiceContainer (resources not yet started).
    """
    engine: AsyncEngine | None = None
    if config.uses_database and repository is None:
        engine = create_database_engine(config)
        repository = SqlAlchemyPostRepository(create_session_factory(engine))
        if database_probe is None:
            database_probe = SqlAlchemyDatabaseProbe(engine, config.db_max_overflow)
    elif repository is None:
        repository = InMemoryPostRepository()

    health_service = HealthService(
        version=config.version,
        runtime_probe=runtime_probe or ProcessRuntimeProbe(),
        database_probe=database_probe,
        thresholds=config.health_thresholds,
        ping_timeout_seconds=config.db_ping_timeout_seconds,
    )

    get_logger_for_service(config.service_name, component="container").info(
        "service_container_built",
        storage=config.storage_backend,
        database_probe=database_probe is not None,
    )

    return ServiceContainer(
        config=config,
        repository=repository,
        post_service=PostService(repository),
        health_service=health_service,
        metrics=metrics
        or MetricsCollector(
            service_name=config.service_name, environment=config.environment
        ),
        engine=engine,
    )
