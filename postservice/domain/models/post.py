"""Post domain model.

A post is the single resource managed by the service. Posts are frozen:
every mutation produces a new instance with a refreshed ``updated_at``,
and the repository replaces the stored instance.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from uuid import uuid4

from postservice.domain.errors.post import PostValidationError


def _utc_now() -> datetime:
    """Return current UTC time with timezone info."""
    return datetime.now(timezone.utc)


def _new_post_id() -> str:
    """Return a fresh opaque post identifier (UUID4 string)."""
    return str(uuid4())


@dataclass(frozen=True, eq=True)
class Post:
    """A stored post.

    Attributes:
        id: Opaque unique identifier, generated server-side, never reassigned.
        title: Post title (non-empty).
        content: Post body (non-empty).
        author: Author display name (non-empty).
        created_at: Creation timestamp (UTC).
        updated_at: Last modification timestamp (UTC).
    """

    id: str
    title: str
    content: str
    author: str
    created_at: datetime = field(default_factory=_utc_now)
    updated_at: datetime = field(default_factory=_utc_now)

    REQUIRED_FIELDS = ("title", "content", "author")

    def __post_init__(self) -> None:
        """Validate post fields."""
        if not self.id:
            raise PostValidationError("id", "must not be empty")
        for name in self.REQUIRED_FIELDS:
            if not getattr(self, name):
                raise PostValidationError(name, "must not be empty")

    @classmethod
    def create(
        cls,
        title: str,
        content: str,
        author: str,
        now: datetime | None = None,
    ) -> Post:
        """Build a new post with a fresh id and equal timestamps.

        Args:
            title: Post title.
            content: Post body.
            author: Author display name.
            now: Creation instant (defaults to the current UTC time).

        Returns:
            New Post whose created_at equals updated_at.

        Raises:
            PostValidationError: If any field is empty.
        """
        timestamp = now or _utc_now()
        return cls(
            id=_new_post_id(),
            title=title,
            content=content,
            author=author,
            created_at=timestamp,
            updated_at=timestamp,
        )

    def with_changes(
        self,
        title: str | None = None,
        content: str | None = None,
        author: str | None = None,
        now: datetime | None = None,
    ) -> Post:
        """Create new post with the given fields replaced.

        Fields that are None or empty keep their stored value, so a field
        cannot be cleared through this method. ``updated_at`` is always
        refreshed, even when no field changes.

        Args:
            title: New title, or None/empty to keep the current one.
            content: New body, or None/empty to keep the current one.
            author: New author, or None/empty to keep the current one.
            now: Modification instant (defaults to the current UTC time).

        Returns:
            New Post with the same id and created_at.
        """
        return replace(
            self,
            title=title or self.title,
            content=content or self.content,
            author=author or self.author,
            updated_at=now or _utc_now(),
        )
