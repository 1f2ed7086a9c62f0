"""Users: list, get-by-id and create endpoints for the users resource.

Invariants:
    - Path ids and bodies go through core/validate_input before any store access
    - Validator failure -> 400, absent row -> 404, duplicate email -> 409
    - StoreError -> 500 "Failed to <verb> <resource>"; the cause is logged, never returned
    - Handlers hold no state between requests
"""

from typing import Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.api.dependencies import get_user_repository, read_json_body, unwrap
from app.core.domain_types import UserId
from app.core.errors import OperationFailedError, ResourceNotFoundError, StoreError
from app.core.repository_protocols import UserRepository
from app.core.validate_input import validate_create_user, validate_resource_id
from app.schemas.envelope import ApiResponse, ok
from app.schemas.user import UserResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=ApiResponse[list[UserResponse]])
async def list_users(users: UserRepository = Depends(get_user_repository)):
    """List all users in insertion order."""
    try:
        rows = await users.list_users()
    except StoreError as e:
        raise OperationFailedError("fetch", "users") from e
    return JSONResponse(content=ok(
        [UserResponse.model_validate(r) for r in rows],
        f"Retrieved {len(rows)} users",
    ))


@router.get("/{user_id}", response_model=ApiResponse[UserResponse])
async def get_user(
    user_id: str, users: UserRepository = Depends(get_user_repository),
):
    """Get one user by id."""
    uid = UserId(unwrap(validate_resource_id(user_id)))
    try:
        user = await users.get_user(uid)
    except StoreError as e:
        raise OperationFailedError("fetch", "user") from e
    if user is None:
        raise ResourceNotFoundError("User", uid)
    return JSONResponse(content=ok(UserResponse.model_validate(user)))


@router.post(
    "", response_model=ApiResponse[UserResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: Any = Depends(read_json_body),
    users: UserRepository = Depends(get_user_repository),
):
    """Create a user from {name, email}."""
    payload = unwrap(validate_create_user(body))
    try:
        user = await users.insert_user(payload.name, payload.email)
    except StoreError as e:
        raise OperationFailedError("create", "user") from e
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=ok(UserResponse.model_validate(user), "User created successfully"),
    )
