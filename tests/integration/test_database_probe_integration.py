"""Integration tests for SqlAlchemyDatabaseProbe and the database checker."""

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine

from postservice.application.dtos.health import HealthStatus
from postservice.application.services.health_service import HealthService
from postservice.infrastructure.adapters.database import SqlAlchemyDatabaseProbe
from postservice.infrastructure.stubs import RuntimeProbeStub

pytestmark = pytest.mark.integration

MAX_OVERFLOW = 10


class TestSqlAlchemyDatabaseProbe:
    """Probe behavior against a live pool."""

    async def test_ping_succeeds(self, engine: AsyncEngine) -> None:
        probe = SqlAlchemyDatabaseProbe(engine, MAX_OVERFLOW)

        await probe.ping()

    async def test_pool_stats_after_ping(self, engine: AsyncEngine) -> None:
        probe = SqlAlchemyDatabaseProbe(engine, MAX_OVERFLOW)
        await probe.ping()

        stats = probe.pool_stats()

        assert stats is not None
        assert stats.in_use == 0
        assert stats.idle >= 1
        assert stats.open_connections == stats.in_use + stats.idle
        assert stats.max_open == 5 + MAX_OVERFLOW

    async def test_readiness_healthy_over_live_database(
        self, engine: AsyncEngine
    ) -> None:
        service = HealthService(
            version="test",
            runtime_probe=RuntimeProbeStub(),
            database_probe=SqlAlchemyDatabaseProbe(engine, MAX_OVERFLOW),
        )

        report = await service.get_readiness()

        assert report.status is HealthStatus.HEALTHY
        assert report.components[0].name == "database"
        assert report.components[0].message == "Database connection healthy"
