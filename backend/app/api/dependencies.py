"""Request Dependencies: repositories, JSON body parsing, validation unwrapping.

Invariants:
    - Repositories are built per request around the request's AsyncSession
    - A body that is not valid JSON raises InputValidationError (400), never 500
    - unwrap() turns an Invalid result into InputValidationError, Valid into its value
"""

from typing import Any, TypeVar

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import FieldError, Invalid, Valid
from app.core.errors import InputValidationError
from app.core.repository_protocols import PostRepository, UserRepository
from app.db.post_repository import SqlAlchemyPostRepository
from app.db.user_repository import SqlAlchemyUserRepository
from app.infrastructure.database import get_db

T = TypeVar("T")


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return SqlAlchemyUserRepository(db)


def get_post_repository(db: AsyncSession = Depends(get_db)) -> PostRepository:
    return SqlAlchemyPostRepository(db)


async def read_json_body(request: Request) -> Any:
    """Parse the raw JSON body without validating its shape."""
    try:
        return await request.json()
    except ValueError:
        raise InputValidationError([FieldError("body", "Invalid JSON body")])


def unwrap(result: Valid[T] | Invalid) -> T:
    if isinstance(result, Invalid):
        raise InputValidationError(list(result.errors))
    return result.value
