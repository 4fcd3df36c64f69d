"""In-memory post repository.

This module provides an in-memory implementation of PostRepositoryProtocol
backed by a dict and guarded by a single reader/writer lock: reads may run
concurrently with each other, never with a write.

Stored posts are frozen, so returning them to callers never exposes
mutable repository state.
"""

from __future__ import annotations

from postservice.application.dtos.post import PostChanges
from postservice.application.ports.post_repository import PostRepositoryProtocol
from postservice.domain.errors.post import PostAlreadyExistsError, PostNotFoundError
from postservice.domain.models.post import Post
from postservice.infrastructure.concurrency.read_write_lock import AsyncReadWriteLock


class InMemoryPostRepository(PostRepositoryProtocol):
    """In-memory implementation of PostRepositoryProtocol.

    Attributes:
        _posts: Dictionary mapping post.id to Post.
        _lock: Reader/writer lock scoped to the whole map.
    """

    def __init__(self) -> None:
        """Initialize the repository with empty storage."""
        self._posts: dict[str, Post] = {}
        self._lock = AsyncReadWriteLock()

    async def create(self, post: Post) -> None:
        """Store a new post.

        Raises:
            PostAlreadyExistsError: If post.id already exists.
        """
        async with self._lock.write_locked():
            if post.id in self._posts:
                raise PostAlreadyExistsError(post.id)
            self._posts[post.id] = post

    async def get_by_id(self, post_id: str) -> Post:
        """Retrieve a post by id.

        Raises:
            PostNotFoundError: If no post has this id.
        """
        async with self._lock.read_locked():
            post = self._posts.get(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    async def get_all(self) -> list[Post]:
        """List every stored post, newest created_at first."""
        async with self._lock.read_locked():
            posts = list(self._posts.values())
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts

    async def update(self, post_id: str, changes: PostChanges) -> Post:
        """Apply present-and-non-empty fields and refresh updated_at.

        Raises:
            PostNotFoundError: If no post has this id.
        """
        async with self._lock.write_locked():
            post = self._posts.get(post_id)
            if post is None:
                raise PostNotFoundError(post_id)
            updated = post.with_changes(**changes.as_updates())
            self._posts[post_id] = updated
        return updated

    async def delete(self, post_id: str) -> None:
        """Remove a post.

        Raises:
            PostNotFoundError: If no post has this id.
        """
        async with self._lock.write_locked():
            if post_id not in self._posts:
                raise PostNotFoundError(post_id)
            del self._posts[post_id]
