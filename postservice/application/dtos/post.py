"""Post DTOs for the application layer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CreatePostDTO:
    """Validated input for creating a post.

    Attributes:
        title: Post title.
        content: Post body.
        author: Author display name.
    """

    title: str
    content: str
    author: str


@dataclass(frozen=True)
class PostChanges:
    """Partial field set for updating a post.

    A field that is None or an empty string leaves the stored value
    unchanged.

    Attributes:
        title: New title, if any.
        content: New body, if any.
        author: New author, if any.
    """

    title: str | None = None
    content: str | None = None
    author: str | None = None

    def as_updates(self) -> dict[str, str]:
        """Return only the present-and-non-empty fields.

        Returns:
            Mapping of field name to new value.
        """
        candidates = {
            "title": self.title,
            "content": self.content,
            "author": self.author,
        }
        return {name: value for name, value in candidates.items() if value}

    def is_empty(self) -> bool:
        """Return True when no field would change."""
        return not self.as_updates()
