"""Unit tests for post domain errors."""

from postservice.domain import PostServiceError
from postservice.domain.errors.post import (
    PostAlreadyExistsError,
    PostError,
    PostNotFoundError,
    PostStorageError,
    PostValidationError,
)


class TestPostErrors:
    """Tests for the post error hierarchy."""

    def test_all_errors_derive_from_service_error(self) -> None:
        for error_type in (
            PostValidationError,
            PostNotFoundError,
            PostStorageError,
            PostAlreadyExistsError,
        ):
            assert issubclass(error_type, PostError)
            assert issubclass(error_type, PostServiceError)

    def test_not_found_carries_post_id(self) -> None:
        error = PostNotFoundError("abc")

        assert error.post_id == "abc"
        assert str(error) == "post not found: abc"

    def test_validation_error_names_field(self) -> None:
        error = PostValidationError("title", "must not be empty")

        assert error.field == "title"
        assert str(error) == "title: must not be empty"

    def test_storage_error_names_operation(self) -> None:
        error = PostStorageError("get_all", "connection reset")

        assert error.operation == "get_all"
        assert "connection reset" in str(error)

    def test_already_exists_is_storage_error_on_create(self) -> None:
        error = PostAlreadyExistsError("abc")

        assert isinstance(error, PostStorageError)
        assert error.operation == "create"
        assert error.post_id == "abc"

    def test_service_error_accepts_message(self) -> None:
        assert str(PostServiceError("test message")) == "test message"
        assert str(PostServiceError()) == ""
