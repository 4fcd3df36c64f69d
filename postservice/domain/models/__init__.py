"""Domain models for postservice.

Immutable models with no infrastructure dependencies.
"""

from postservice.domain.models.post import Post

__all__: list[str] = ["Post"]
