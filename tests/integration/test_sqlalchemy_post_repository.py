"""Integration tests for SqlAlchemyPostRepository against PostgreSQL."""

from datetime import datetime, timedelta, timezone

import pytest

from postservice.application.dtos.post import PostChanges
from postservice.domain.errors.post import PostAlreadyExistsError, PostNotFoundError
from postservice.domain.models.post import Post
from postservice.infrastructure.adapters.persistence import SqlAlchemyPostRepository

pytestmark = pytest.mark.integration

BASE = datetime(2021, 6, 1, 9, 30, tzinfo=timezone.utc)


def _post(title: str = "Title", minutes: int = 0) -> Post:
    return Post.create(
        title=title,
        content="Body",
        author="Author",
        now=BASE + timedelta(minutes=minutes),
    )


class TestSqlAlchemyPostRepository:
    """Repository contract over a real database."""

    async def test_create_then_get(
        self, post_repository: SqlAlchemyPostRepository
    ) -> None:
        post = _post()

        await post_repository.create(post)

        assert await post_repository.get_by_id(post.id) == post

    async def test_create_duplicate_id_rejected(
        self, post_repository: SqlAlchemyPostRepository
    ) -> None:
        post = _post()
        await post_repository.create(post)

        with pytest.raises(PostAlreadyExistsError):
            await post_repository.create(post)

    async def test_get_missing_raises_not_found(
        self, post_repository: SqlAlchemyPostRepository
    ) -> None:
        with pytest.raises(PostNotFoundError):
            await post_repository.get_by_id("does-not-exist")

    async def test_get_all_newest_first(
        self, post_repository: SqlAlchemyPostRepository
    ) -> None:
        oldest = _post("oldest", minutes=0)
        newest = _post("newest", minutes=10)
        middle = _post("middle", minutes=5)
        for post in (oldest, newest, middle):
            await post_repository.create(post)

        posts = await post_repository.get_all()

        assert [p.title for p in posts] == ["newest", "middle", "oldest"]

    async def test_get_all_empty(
        self, post_repository: SqlAlchemyPostRepository
    ) -> None:
        assert await post_repository.get_all() == []

    async def test_update_applies_present_fields_only(
        self, post_repository: SqlAlchemyPostRepository
    ) -> None:
        post = _post()
        await post_repository.create(post)

        updated = await post_repository.update(
            post.id, PostChanges(title="New title", content="")
        )

        assert updated.title == "New title"
        assert updated.content == post.content
        assert updated.author == post.author
        assert updated.created_at == post.created_at
        assert updated.updated_at > post.updated_at

    async def test_update_missing_raises_not_found(
        self, post_repository: SqlAlchemyPostRepository
    ) -> None:
        with pytest.raises(PostNotFoundError):
            await post_repository.update("does-not-exist", PostChanges(title="x"))

    async def test_delete_removes_post(
        self, post_repository: SqlAlchemyPostRepository
    ) -> None:
        post = _post()
        await post_repository.create(post)

        await post_repository.delete(post.id)

        with pytest.raises(PostNotFoundError):
            await post_repository.get_by_id(post.id)

    async def test_delete_missing_raises_not_found(
        self, post_repository: SqlAlchemyPostRepository
    ) -> None:
        with pytest.raises(PostNotFoundError):
            await post_repository.delete("does-not-exist")
