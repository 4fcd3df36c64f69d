"""
Domain layer - Post entity and domain errors.

This layer contains:
- Domain models (Post)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or api.
Only stdlib and typing imports are allowed.
"""

from postservice.domain.errors import (
    PostAlreadyExistsError,
    PostNotFoundError,
    PostStorageError,
    PostValidationError,
)
from postservice.domain.exceptions import PostServiceError
from postservice.domain.models import Post

__all__: list[str] = [
    "Post",
    "PostServiceError",
    "PostAlreadyExistsError",
    "PostNotFoundError",
    "PostStorageError",
    "PostValidationError",
]
