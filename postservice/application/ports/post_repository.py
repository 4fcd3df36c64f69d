"""Post repository port.

This module defines the abstract interface for post storage. Two
interchangeable implementations exist: an in-memory map guarded by a
reader/writer lock, and a SQLAlchemy-backed relational table.

Developer Golden Rules:
1. FAIL LOUD - Repository raises domain errors, never returns sentinels
2. NOT FOUND IS AN ERROR - get_by_id/update/delete raise PostNotFoundError
3. STORAGE FAILURES ARE WRAPPED - backend errors surface as PostStorageError
"""

from __future__ import annotations

from typing import Protocol

from postservice.application.dtos.post import PostChanges
from postservice.domain.models.post import Post


class PostRepositoryProtocol(Protocol):
    """Protocol for post storage operations.

    Methods:
        create: Store a new post
        get_by_id: Retrieve a post by id
        get_all: List every stored post
        update: Apply a partial update to a post
        delete: Remove a post
    """

    async def create(self, post: Post) -> None:
        """Store a new post.

        Args:
            post: The post to store.

        Raises:
            PostAlreadyExistsError: If post.id is already stored.
            PostStorageError: If the backing store fails.
        """
        ...

    async def get_by_id(self, post_id: str) -> Post:
        """Retrieve a post by id.

        Args:
            post_id: The post identifier.

        Returns:
            The stored post.

        Raises:
            PostNotFoundError: If no post has this id.
            PostStorageError: If the backing store fails.
        """
        ...

    async def get_all(self) -> list[Post]:
        """List every stored post, newest first.

        Returns:
            All posts ordered by created_at descending (empty list if none).

        Raises:
            PostStorageError: If the backing store fails.
        """
        ...

    async def update(self, post_id: str, changes: PostChanges) -> Post:
        """Apply present-and-non-empty fields and refresh updated_at.

        Args:
            post_id: The post identifier.
            changes: Partial field set.

        Returns:
            The post as stored after the update.

        Raises:
            PostNotFoundError: If no post has this id.
            PostStorageError: If the backing store fails.
        """
        ...

    async def delete(self, post_id: str) -> None:
        """Remove a post irrevocably.

        Args:
            post_id: The post identifier.

        Raises:
            PostNotFoundError: If no post has this id.
            PostStorageError: If the backing store fails.
        """
        ...
