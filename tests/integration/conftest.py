"""
Integration test configuration with testcontainers.

This module provides a session-scoped PostgreSQL container and per-test
engine fixtures for the SQLAlchemy adapters.

Container Reuse Pattern:
- The container is started once per test session (scope="session")
- The posts table is emptied before each test (function-scoped engine)
- The container is stopped after all tests complete

Usage:
    @pytest.mark.integration
    async def test_example(post_repository: SqlAlchemyPostRepository) -> None:
        ...

Note: Docker must be running. Without it, tests needing the container are
skipped.
"""

from collections.abc import AsyncGenerator, Generator

import pytest
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from testcontainers.postgres import PostgresContainer

from postservice.bootstrap.database import create_session_factory
from postservice.infrastructure.adapters.persistence import (
    SqlAlchemyPostRepository,
    create_post_schema,
)
from postservice.infrastructure.adapters.persistence.orm import PostRecord

POOL_SIZE = 5
MAX_OVERFLOW = 10


@pytest.fixture(scope="session")
def postgres_container() -> Generator[PostgresContainer, None, None]:
    """Session-scoped PostgreSQL 16 container.

    The container is started once and reused across all integration tests.
    """
    postgres = PostgresContainer("postgres:16-alpine")
    try:
        postgres.start()
    except Exception as e:
        pytest.skip(f"PostgreSQL container unavailable: {e}")
    try:
        yield postgres
    finally:
        postgres.stop()


@pytest.fixture(scope="session")
def postgres_async_url(postgres_container: PostgresContainer) -> str:
    """Get async-compatible PostgreSQL connection URL.

    testcontainers returns a psycopg2 URL by default, we convert to asyncpg.

    Returns:
        postgresql+asyncpg:// URL string
    """
    sync_url = postgres_container.get_connection_url()
    async_url: str = sync_url.replace(
        "postgresql+psycopg2://", "postgresql+asyncpg://"
    ).replace("postgresql://", "postgresql+asyncpg://")
    return async_url


@pytest.fixture
async def engine(postgres_async_url: str) -> AsyncGenerator[AsyncEngine, None]:
    """Per-test engine over an empty posts table."""
    engine = create_async_engine(
        postgres_async_url, pool_size=POOL_SIZE, max_overflow=MAX_OVERFLOW
    )
    await create_post_schema(engine)
    async with engine.begin() as conn:
        await conn.execute(delete(PostRecord))
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the per-test engine."""
    return create_session_factory(engine)


@pytest.fixture
def post_repository(
    session_factory: async_sessionmaker[AsyncSession],
) -> SqlAlchemyPostRepository:
    """PostgreSQL-backed post repository."""
    return SqlAlchemyPostRepository(session_factory)
