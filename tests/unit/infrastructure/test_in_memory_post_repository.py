"""Unit tests for InMemoryPostRepository."""

import asyncio
from datetime import datetime, timedelta, timezone

import pytest

from postservice.application.dtos.post import PostChanges
from postservice.domain.errors.post import PostAlreadyExistsError, PostNotFoundError
from postservice.domain.models.post import Post
from postservice.infrastructure.adapters.persistence import InMemoryPostRepository

BASE = datetime(2020, 1, 1, 12, 0, tzinfo=timezone.utc)


def _post(title: str = "A", minutes: int = 0) -> Post:
    return Post.create(
        title=title, content="B", author="C", now=BASE + timedelta(minutes=minutes)
    )


class TestInMemoryPostRepository:
    """Tests for the in-memory repository contract."""

    @pytest.mark.asyncio
    async def test_create_then_get(self, repository: InMemoryPostRepository) -> None:
        post = _post()

        await repository.create(post)

        assert await repository.get_by_id(post.id) == post

    @pytest.mark.asyncio
    async def test_create_duplicate_id_rejected(
        self, repository: InMemoryPostRepository
    ) -> None:
        post = _post()
        await repository.create(post)

        with pytest.raises(PostAlreadyExistsError):
            await repository.create(post)

        assert await repository.get_all() == [post]

    @pytest.mark.asyncio
    async def test_get_missing_raises_not_found(
        self, repository: InMemoryPostRepository
    ) -> None:
        with pytest.raises(PostNotFoundError) as exc_info:
            await repository.get_by_id("missing")

        assert exc_info.value.post_id == "missing"

    @pytest.mark.asyncio
    async def test_get_all_empty_returns_empty_list(
        self, repository: InMemoryPostRepository
    ) -> None:
        assert await repository.get_all() == []

    @pytest.mark.asyncio
    async def test_get_all_newest_first(
        self, repository: InMemoryPostRepository
    ) -> None:
        oldest = _post("old", minutes=0)
        newest = _post("new", minutes=10)
        middle = _post("mid", minutes=5)
        for post in (oldest, newest, middle):
            await repository.create(post)

        posts = await repository.get_all()

        assert [p.title for p in posts] == ["new", "mid", "old"]

    @pytest.mark.asyncio
    async def test_update_applies_non_empty_fields(
        self, repository: InMemoryPostRepository
    ) -> None:
        post = _post()
        await repository.create(post)

        updated = await repository.update(post.id, PostChanges(title="Z", content=""))

        assert updated.title == "Z"
        assert updated.content == "B"
        assert updated.updated_at > post.updated_at
        assert await repository.get_by_id(post.id) == updated

    @pytest.mark.asyncio
    async def test_update_with_no_fields_refreshes_updated_at(
        self, repository: InMemoryPostRepository
    ) -> None:
        post = _post()
        await repository.create(post)

        updated = await repository.update(post.id, PostChanges())

        assert (updated.title, updated.content, updated.author) == ("A", "B", "C")
        assert updated.updated_at > post.updated_at

    @pytest.mark.asyncio
    async def test_update_missing_raises_not_found(
        self, repository: InMemoryPostRepository
    ) -> None:
        with pytest.raises(PostNotFoundError):
            await repository.update("missing", PostChanges(title="Z"))

    @pytest.mark.asyncio
    async def test_delete(self, repository: InMemoryPostRepository) -> None:
        post = _post()
        await repository.create(post)

        await repository.delete(post.id)

        assert await repository.get_all() == []
        with pytest.raises(PostNotFoundError):
            await repository.delete(post.id)

    @pytest.mark.asyncio
    async def test_concurrent_creates_all_stored(
        self, repository: InMemoryPostRepository
    ) -> None:
        posts = [_post(f"p{i}", minutes=i) for i in range(50)]

        await asyncio.gather(*(repository.create(p) for p in posts))

        assert len(await repository.get_all()) == 50
