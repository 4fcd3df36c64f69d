"""Post service.

Application service orchestrating post CRUD. It holds no state of its own:
create builds a new Post entity from the validated request, every other
operation passes straight through to the repository and propagates its
errors unchanged.

Developer Golden Rules:
1. BUILD ON CREATE - Only create_post constructs entities (id + timestamps)
2. PASS THROUGH - No business rules beyond entity construction
3. FAIL LOUD - Repository errors propagate to the API layer untouched
"""

from __future__ import annotations

from structlog import get_logger

from postservice.application.dtos.post import CreatePostDTO, PostChanges
from postservice.application.ports.post_repository import PostRepositoryProtocol
from postservice.domain.models.post import Post

logger = get_logger()


class PostService:
    """Service for post create/read/update/delete.

    Attributes:
        _repository: Post storage implementation.
    """

    def __init__(self, repository: PostRepositoryProtocol) -> None:
        """Initialize the post service.

        Args:
            repository: Post storage implementation.
        """
        self._repository = repository
        self._log = logger.bind(service="PostService", component="posts")

    async def create_post(self, request: CreatePostDTO) -> Post:
        """Create and store a new post.

        Args:
            request: Validated post fields.

        Returns:
            The stored post with its generated id and timestamps.

        Raises:
            PostValidationError: If a field is empty.
            PostStorageError: If the repository fails.
        """
        post = Post.create(
            title=request.title,
            content=request.content,
            author=request.author,
        )
        await self._repository.create(post)
        self._log.info("post_created", post_id=post.id, author=post.author)
        return post

    async def get_post(self, post_id: str) -> Post:
        """Get a single post.

        Raises:
            PostNotFoundError: If no post has this id.
        """
        self._log.debug("post_requested", post_id=post_id)
        return await self._repository.get_by_id(post_id)

    async def get_all_posts(self) -> list[Post]:
        """List all posts."""
        posts = await self._repository.get_all()
        self._log.debug("posts_listed", count=len(posts))
        return posts

    async def update_post(self, post_id: str, changes: PostChanges) -> Post:
        """Apply a partial update to a post.

        Args:
            post_id: The post identifier.
            changes: Fields to change; empty fields are left untouched.

        Returns:
            The updated post.

        Raises:
            PostNotFoundError: If no post has this id.
        """
        if changes.is_empty():
            self._log.debug("post_update_touch_only", post_id=post_id)
        post = await self._repository.update(post_id, changes)
        self._log.info(
            "post_updated",
            post_id=post_id,
            fields=sorted(changes.as_updates()),
        )
        return post

    async def delete_post(self, post_id: str) -> None:
        """Delete a post.

        Raises:
            PostNotFoundError: If no post has this id.
        """
        await self._repository.delete(post_id)
        self._log.info("post_deleted", post_id=post_id)
