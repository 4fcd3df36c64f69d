"""
Pytest configuration and shared fixtures for postservice tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Probes are replaced with stubs from postservice.infrastructure.stubs
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/ and are marked ``integration``
"""

from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from postservice.api.main import create_app
from postservice.application.services.health_service import HealthService
from postservice.bootstrap.container import ServiceContainer, build_container
from postservice.config.service_config import TEST_SERVICE_CONFIG
from postservice.infrastructure.adapters.persistence import InMemoryPostRepository
from postservice.infrastructure.stubs import DatabaseProbeStub, RuntimeProbeStub


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from postservice import __version__

    return __version__


@pytest.fixture
def runtime_probe() -> RuntimeProbeStub:
    """Runtime probe reporting low memory and few tasks."""
    return RuntimeProbeStub()


@pytest.fixture
def database_probe() -> DatabaseProbeStub:
    """Database probe reporting a reachable, lightly used database."""
    return DatabaseProbeStub()


@pytest.fixture
def repository() -> InMemoryPostRepository:
    """Empty in-memory post repository."""
    return InMemoryPostRepository()


@pytest.fixture
def health_service(
    runtime_probe: RuntimeProbeStub, database_probe: DatabaseProbeStub
) -> HealthService:
    """Health service over stub probes."""
    return HealthService(
        version="1.2.3",
        runtime_probe=runtime_probe,
        database_probe=database_probe,
    )


@pytest.fixture
def container(
    repository: InMemoryPostRepository,
    runtime_probe: RuntimeProbeStub,
    database_probe: DatabaseProbeStub,
) -> ServiceContainer:
    """Container with in-memory storage and stub probes."""
    return build_container(
        TEST_SERVICE_CONFIG,
        repository=repository,
        database_probe=database_probe,
        runtime_probe=runtime_probe,
    )


@pytest.fixture
def app(container: ServiceContainer) -> FastAPI:
    """Fully wired application over the test container."""
    return create_app(container=container)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """Test client running the app lifespan."""
    with TestClient(app) as test_client:
        yield test_client
