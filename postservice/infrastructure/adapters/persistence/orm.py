"""SQLAlchemy ORM mapping for posts.

The ``posts`` table mirrors the Post domain model. Records never leave the
persistence adapter: they are converted to and from frozen Post instances
at the repository boundary.
"""

from __future__ import annotations

from sqlalchemy import Column, DateTime, Index, String, Text
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.orm import declarative_base

from postservice.domain.models.post import Post

# SQLAlchemy base
Base = declarative_base()


class PostRecord(Base):
    """Row in the ``posts`` table."""

    __tablename__ = "posts"

    id = Column(String(36), primary_key=True)
    title = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    author = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    __table_args__ = (Index("ix_posts_created_at", "created_at"),)

    @classmethod
    def from_domain(cls, post: Post) -> PostRecord:
        """Build a record from a domain post."""
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            author=post.author,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )

    def to_domain(self) -> Post:
        """Convert this record to a frozen domain post."""
        return Post(
            id=self.id,
            title=self.title,
            content=self.content,
            author=self.author,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


async def create_post_schema(engine: AsyncEngine) -> None:
    """Create the posts table and its index if they do not exist.

    Args:
        engine: Async engine bound to the target database.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
