"""Post persistence adapters.

- InMemoryPostRepository: dict + reader/writer lock
- SqlAlchemyPostRepository: PostgreSQL via SQLAlchemy async
"""

from postservice.infrastructure.adapters.persistence.in_memory_post_repository import (
    InMemoryPostRepository,
)
from postservice.infrastructure.adapters.persistence.orm import (
    Base,
    PostRecord,
    create_post_schema,
)
from postservice.infrastructure.adapters.persistence.sqlalchemy_post_repository import (
    SqlAlchemyPostRepository,
)

__all__: list[str] = [
    "Base",
    "InMemoryPostRepository",
    "PostRecord",
    "SqlAlchemyPostRepository",
    "create_post_schema",
]
