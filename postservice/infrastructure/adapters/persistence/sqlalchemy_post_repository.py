"""SQLAlchemy post repository (PostgreSQL via asyncpg).

This module provides the relational implementation of PostRepositoryProtocol.
Each statement runs in its own session and transaction from the injected
async_sessionmaker.

Consistency Note:
update() is read, write, re-read without an enclosing transaction. A delete
landing between the steps surfaces as PostNotFoundError on the final read,
which is acceptable best-effort consistency for this service.

Error Mapping:
- IntegrityError on insert -> PostAlreadyExistsError
- Any other SQLAlchemyError, driver error (asyncpg.PostgresError) or
  connection failure (OSError, TimeoutError) -> PostStorageError
  (original chained). asyncpg raises connect failures as plain OSError
  subclasses that SQLAlchemy does not wrap.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone

from asyncpg import PostgresError
from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from structlog import get_logger

from postservice.application.dtos.post import PostChanges
from postservice.application.ports.post_repository import PostRepositoryProtocol
from postservice.domain.errors.post import (
    PostAlreadyExistsError,
    PostNotFoundError,
    PostStorageError,
)
from postservice.domain.models.post import Post
from postservice.infrastructure.adapters.persistence.orm import PostRecord

logger = get_logger()

BACKEND_ERRORS: tuple[type[BaseException], ...] = (
    SQLAlchemyError,
    PostgresError,
    OSError,
    TimeoutError,
)


def _storage_error(operation: str, e: BaseException) -> PostStorageError:
    logger.error(
        "post_storage_failed",
        operation=operation,
        error_type=type(e).__name__,
        error=str(e),
    )
    return PostStorageError(operation, str(e) or type(e).__name__)


@contextmanager
def _storage_errors(operation: str) -> Iterator[None]:
    """Translate backend failures into PostStorageError."""
    try:
        yield
    except BACKEND_ERRORS as e:
        raise _storage_error(operation, e) from e


class SqlAlchemyPostRepository(PostRepositoryProtocol):
    """PostgreSQL implementation of PostRepositoryProtocol.

    Attributes:
        _session_factory: SQLAlchemy async session factory.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize the repository.

        Args:
            session_factory: SQLAlchemy async session factory.
        """
        self._session_factory = session_factory

    async def create(self, post: Post) -> None:
        """Insert a new post.

        Raises:
            PostAlreadyExistsError: If post.id already exists.
            PostStorageError: On any other database failure.
        """
        try:
            async with self._session_factory() as session, session.begin():
                session.add(PostRecord.from_domain(post))
        except IntegrityError as e:
            raise PostAlreadyExistsError(post.id) from e
        except BACKEND_ERRORS as e:
            raise _storage_error("create", e) from e

    async def get_by_id(self, post_id: str) -> Post:
        """Retrieve a post by id.

        Raises:
            PostNotFoundError: If no post has this id.
        """
        with _storage_errors("get_by_id"):
            async with self._session_factory() as session:
                record = await session.get(PostRecord, post_id)
                post = record.to_domain() if record is not None else None
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    async def get_all(self) -> list[Post]:
        """List every stored post ordered by created_at descending."""
        with _storage_errors("get_all"):
            async with self._session_factory() as session:
                result = await session.execute(
                    select(PostRecord).order_by(PostRecord.created_at.desc())
                )
                return [record.to_domain() for record in result.scalars().all()]

    async def update(self, post_id: str, changes: PostChanges) -> Post:
        """Apply present-and-non-empty fields and refresh updated_at.

        Raises:
            PostNotFoundError: If no post has this id (before or after write).
        """
        await self.get_by_id(post_id)

        values: dict[str, object] = dict(changes.as_updates())
        values["updated_at"] = datetime.now(timezone.utc)
        with _storage_errors("update"):
            async with self._session_factory() as session, session.begin():
                await session.execute(
                    update(PostRecord).where(PostRecord.id == post_id).values(**values)
                )

        return await self.get_by_id(post_id)

    async def delete(self, post_id: str) -> None:
        """Remove a post.

        Raises:
            PostNotFoundError: If no row was deleted.
        """
        with _storage_errors("delete"):
            async with self._session_factory() as session, session.begin():
                result = await session.execute(
                    delete(PostRecord).where(PostRecord.id == post_id)
                )
                deleted = result.rowcount
        if deleted == 0:
            raise PostNotFoundError(post_id)
