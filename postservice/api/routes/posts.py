"""Post CRUD endpoints.

Routes:
- POST   /posts            create (201)
- GET    /posts            list, newest first (200, [] when empty)
- GET    /posts/{post_id}  fetch (200 / 404)
- PUT    /posts/{post_id}  partial update (200 / 404)
- DELETE /posts/{post_id}  delete (204 / 404)

Error Mapping:
- PostValidationError -> 400
- PostNotFoundError -> 404
- PostStorageError -> 500 (PostAlreadyExistsError included)

Request body validation failures are turned into 400 problem details by the
application-level RequestValidationError handler.
"""

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from postservice.api.dependencies.services import get_post_service
from postservice.api.models.post import (
    CreatePostRequest,
    ErrorResponse,
    PostResponse,
    UpdatePostRequest,
)
from postservice.api.routes.problems import problem
from postservice.application.services.post_service import PostService
from postservice.domain.errors.post import (
    PostNotFoundError,
    PostStorageError,
    PostValidationError,
)
from postservice.infrastructure.observability import get_logger_for_service

router = APIRouter(prefix="/posts", tags=["posts"])


def _not_found(request: Request, post_id: str) -> HTTPException:
    return problem(
        request,
        status.HTTP_404_NOT_FOUND,
        "post-not-found",
        "Post Not Found",
        f"Post {post_id} not found",
    )


def _storage_failure(request: Request, e: PostStorageError) -> HTTPException:
    log = get_logger_for_service("postservice", component="posts_api")
    log.error(
        "post_request_storage_error",
        operation=e.operation,
        error=str(e),
        path=request.url.path,
    )
    return problem(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "storage-error",
        "Storage Error",
        f"Failed to {e.operation} post",
    )


@router.post(
    "",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request body"},
        500: {"model": ErrorResponse, "description": "Storage failure"},
    },
    summary="Create a post",
)
async def create_post(
    request: Request,
    body: CreatePostRequest,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Create a post with a server-generated id and timestamps."""
    try:
        post = await service.create_post(body.to_dto())
    except PostValidationError as e:
        raise problem(
            request,
            status.HTTP_400_BAD_REQUEST,
            "invalid-post",
            "Invalid Post",
            str(e),
        ) from None
    except PostStorageError as e:
        raise _storage_failure(request, e) from None
    return PostResponse.from_domain(post)


@router.get(
    "",
    response_model=list[PostResponse],
    responses={500: {"model": ErrorResponse, "description": "Storage failure"}},
    summary="List posts",
)
async def list_posts(
    request: Request,
    service: PostService = Depends(get_post_service),
) -> list[PostResponse]:
    """List every post, newest first. An empty store yields []."""
    try:
        posts = await service.get_all_posts()
    except PostStorageError as e:
        raise _storage_failure(request, e) from None
    return [PostResponse.from_domain(post) for post in posts]


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Post not found"},
        500: {"model": ErrorResponse, "description": "Storage failure"},
    },
    summary="Get a post",
)
async def get_post(
    post_id: str,
    request: Request,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Fetch one post by id."""
    try:
        post = await service.get_post(post_id)
    except PostNotFoundError:
        raise _not_found(request, post_id) from None
    except PostStorageError as e:
        raise _storage_failure(request, e) from None
    return PostResponse.from_domain(post)


@router.put(
    "/{post_id}",
    response_model=PostResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request body"},
        404: {"model": ErrorResponse, "description": "Post not found"},
        500: {"model": ErrorResponse, "description": "Storage failure"},
    },
    summary="Update a post",
)
async def update_post(
    post_id: str,
    request: Request,
    body: UpdatePostRequest,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Apply the non-empty fields of the body and refresh updated_at."""
    try:
        post = await service.update_post(post_id, body.to_changes())
    except PostNotFoundError:
        raise _not_found(request, post_id) from None
    except PostStorageError as e:
        raise _storage_failure(request, e) from None
    return PostResponse.from_domain(post)


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        404: {"model": ErrorResponse, "description": "Post not found"},
        500: {"model": ErrorResponse, "description": "Storage failure"},
    },
    summary="Delete a post",
)
async def delete_post(
    post_id: str,
    request: Request,
    service: PostService = Depends(get_post_service),
) -> Response:
    """Delete one post. Responds 204 with an empty body."""
    try:
        await service.delete_post(post_id)
    except PostNotFoundError:
        raise _not_found(request, post_id) from None
    except PostStorageError as e:
        raise _storage_failure(request, e) from None
    return Response(status_code=status.HTTP_204_NO_CONTENT)
