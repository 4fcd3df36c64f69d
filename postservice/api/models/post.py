"""Post API request/response models.

Pydantic models for the post CRUD endpoints.

Developer Golden Rules:
1. VALIDATE EARLY - Pydantic rejects missing or empty required fields (400)
2. PARTIAL UPDATES - Absent, null and empty fields leave stored values alone
3. TYPE SAFETY - All fields typed, timestamps serialized with a Z suffix
"""

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, Field, PlainSerializer

from postservice.application.dtos.post import CreatePostDTO, PostChanges
from postservice.domain.models.post import Post

# Custom datetime serializer for ISO 8601 with Z suffix (Pydantic v2)
DateTimeWithZ = Annotated[
    datetime,
    PlainSerializer(
        lambda v: v.isoformat().replace("+00:00", "Z") if v else None, return_type=str
    ),
]


class CreatePostRequest(BaseModel):
    """Request to create a post.

    Attributes:
        title: Post title (required, non-empty).
        content: Post body (required, non-empty).
        author: Author display name (required, non-empty).
    """

    title: str = Field(..., min_length=1, description="Post title")
    content: str = Field(..., min_length=1, description="Post body")
    author: str = Field(..., min_length=1, description="Author display name")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Hello",
                    "content": "First post",
                    "author": "alice",
                }
            ]
        }
    }

    def to_dto(self) -> CreatePostDTO:
        """Convert to the application-layer DTO."""
        return CreatePostDTO(title=self.title, content=self.content, author=self.author)


class UpdatePostRequest(BaseModel):
    """Request to partially update a post.

    Every field is optional. A field that is absent, null or empty keeps
    its stored value.
    """

    title: str | None = Field(default=None, description="New title")
    content: str | None = Field(default=None, description="New body")
    author: str | None = Field(default=None, description="New author")

    def to_changes(self) -> PostChanges:
        """Convert to the application-layer change set."""
        return PostChanges(title=self.title, content=self.content, author=self.author)


class PostResponse(BaseModel):
    """A stored post."""

    id: str = Field(description="Opaque post identifier (UUID4)")
    title: str
    content: str
    author: str
    created_at: DateTimeWithZ = Field(description="Creation time (UTC)")
    updated_at: DateTimeWithZ = Field(description="Last modification time (UTC)")

    @classmethod
    def from_domain(cls, post: Post) -> "PostResponse":
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            author=post.author,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class ProblemDetail(BaseModel):
    """RFC 7807 problem details error body.

    Attributes:
        type: URI identifying the problem type.
        title: Short human-readable summary.
        status: HTTP status code.
        detail: Explanation specific to this occurrence.
        instance: URI of the request that failed.
        errors: Field-level validation failures (400 only).
    """

    type: str
    title: str
    status: int
    detail: str
    instance: str
    errors: list[dict[str, Any]] | None = None


class ErrorResponse(BaseModel):
    """Error envelope returned for every 4xx/5xx response."""

    detail: ProblemDetail
