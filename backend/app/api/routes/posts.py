"""Posts: list, get-by-id and create endpoints for the posts resource.

Invariants:
    - Same outcome mapping as the users routes
    - A post is only inserted when its authorId names an existing user (else 404)
"""

from typing import Any

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from app.api.dependencies import (
    get_post_repository, get_user_repository, read_json_body, unwrap,
)
from app.core.domain_types import PostId, UserId
from app.core.errors import OperationFailedError, ResourceNotFoundError, StoreError
from app.core.repository_protocols import PostRepository, UserRepository
from app.core.validate_input import validate_create_post, validate_resource_id
from app.schemas.envelope import ApiResponse, ok
from app.schemas.post import PostResponse

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=ApiResponse[list[PostResponse]])
async def list_posts(
    author_id: str | None = Query(None, alias="authorId"),
    posts: PostRepository = Depends(get_post_repository),
):
    """List posts, optionally only those by one author."""
    author = (
        UserId(unwrap(validate_resource_id(author_id)))
        if author_id is not None else None
    )
    try:
        rows = await posts.list_posts(author)
    except StoreError as e:
        raise OperationFailedError("fetch", "posts") from e
    return JSONResponse(content=ok(
        [PostResponse.model_validate(r) for r in rows],
        f"Retrieved {len(rows)} posts",
    ))


@router.get("/{post_id}", response_model=ApiResponse[PostResponse])
async def get_post(
    post_id: str, posts: PostRepository = Depends(get_post_repository),
):
    """Get one post by id."""
    pid = PostId(unwrap(validate_resource_id(post_id)))
    try:
        post = await posts.get_post(pid)
    except StoreError as e:
        raise OperationFailedError("fetch", "post") from e
    if post is None:
        raise ResourceNotFoundError("Post", pid)
    return JSONResponse(content=ok(PostResponse.model_validate(post)))


@router.post(
    "", response_model=ApiResponse[PostResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_post(
    body: Any = Depends(read_json_body),
    posts: PostRepository = Depends(get_post_repository),
    users: UserRepository = Depends(get_user_repository),
):
    """Create a post for an existing author."""
    payload = unwrap(validate_create_post(body))
    author_id = UserId(payload.author_id)
    try:
        author = await users.get_user(author_id)
        if author is None:
            raise ResourceNotFoundError("User", author_id)
        post = await posts.insert_post(
            payload.title, payload.content, author_id, payload.published,
        )
    except StoreError as e:
        raise OperationFailedError("create", "post") from e
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=ok(PostResponse.model_validate(post), "Post created successfully"),
    )
