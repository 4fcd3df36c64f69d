"""Domain errors for postservice.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from PostServiceError.
"""

from postservice.domain.errors.post import (
    PostAlreadyExistsError,
    PostError,
    PostNotFoundError,
    PostStorageError,
    PostValidationError,
)

__all__: list[str] = [
    "PostError",
    "PostAlreadyExistsError",
    "PostNotFoundError",
    "PostStorageError",
    "PostValidationError",
]
