"""User Repository: list, get-by-id and insert against the users table.

Invariants:
    - list_users orders by id (insertion order), never fails on an empty table
    - get_user returns None for an absent id ("not found" is not an error),
      including ids above MAX_STORE_ID, which the store cannot hold
    - insert_user raises UniqueConstraintViolation on duplicate email, StoreError otherwise
    - Failed writes roll the session back before raising
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import MAX_STORE_ID, UserId
from app.core.errors import StoreError
from app.db.errors import map_store_error
from app.models import User

logger = logging.getLogger(__name__)


class SqlAlchemyUserRepository:
    """UserRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_users(self) -> list[User]:
        try:
            result = await self._db.execute(select(User).order_by(User.id))
        except SQLAlchemyError as e:
            raise StoreError(e, "select") from e
        return list(result.scalars().all())

    async def get_user(self, user_id: UserId) -> User | None:
        if user_id > MAX_STORE_ID:
            return None
        try:
            result = await self._db.execute(
                select(User).where(User.id == user_id),
            )
        except SQLAlchemyError as e:
            raise StoreError(e, "select") from e
        return result.scalar_one_or_none()

    async def insert_user(self, name: str, email: str) -> User:
        user = User(name=name, email=email)
        self._db.add(user)
        try:
            await self._db.commit()
            await self._db.refresh(user)
        except SQLAlchemyError as e:
            await self._db.rollback()
            raise map_store_error(e, "insert", "user", "email") from e
        logger.info("User created", extra={"resource": "user", "operation": "insert"})
        return user
