"""Post domain errors.

Error taxonomy for post operations:
- PostValidationError: malformed or missing post fields (HTTP 400)
- PostNotFoundError: no post with the requested id (HTTP 404)
- PostStorageError: the backing store failed (HTTP 500)
- PostAlreadyExistsError: a post with the same id is already stored
"""

from __future__ import annotations

from postservice.domain.exceptions import PostServiceError


class PostError(PostServiceError):
    """Base error for post operations."""

    pass


class PostValidationError(PostError):
    """Raised when post fields fail validation.

    Attributes:
        field: Name of the offending field.
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize the error.

        Args:
            field: Name of the offending field.
            message: Detailed error message.
        """
        self.field = field
        super().__init__(f"{field}: {message}")


class PostNotFoundError(PostError):
    """Raised when no post exists for the requested id.

    Attributes:
        post_id: The id that was looked up.
    """

    def __init__(self, post_id: str) -> None:
        """Initialize the error.

        Args:
            post_id: The id that was looked up.
        """
        self.post_id = post_id
        super().__init__(f"post not found: {post_id}")


class PostStorageError(PostError):
    """Raised when the backing store fails to complete an operation.

    Attributes:
        operation: Repository operation that failed (create, get_all, ...).
    """

    def __init__(self, operation: str, message: str) -> None:
        """Initialize the error.

        Args:
            operation: Repository operation that failed.
            message: Detailed error message.
        """
        self.operation = operation
        super().__init__(f"storage failure during {operation}: {message}")


class PostAlreadyExistsError(PostStorageError):
    """Raised when creating a post whose id is already stored."""

    def __init__(self, post_id: str) -> None:
        """Initialize the error.

        Args:
            post_id: The duplicate id.
        """
        self.post_id = post_id
        super().__init__("create", f"post already exists: {post_id}")
