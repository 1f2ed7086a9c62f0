"""Post Repository: list, get-by-id and insert against the posts table.

Invariants:
    - Ids above MAX_STORE_ID never reach the driver: reads treat them as absent,
      insert_post raises StoreError
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import MAX_STORE_ID, PostId, UserId
from app.core.errors import StoreError
from app.db.errors import map_store_error
from app.models import Post

logger = logging.getLogger(__name__)


class SqlAlchemyPostRepository:
    """PostRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_posts(self, author_id: UserId | None = None) -> list[Post]:
        if author_id is not None and author_id > MAX_STORE_ID:
            return []
        query = select(Post).order_by(Post.id)
        if author_id is not None:
            query = query.where(Post.author_id == author_id)
        try:
            result = await self._db.execute(query)
        except SQLAlchemyError as e:
            raise StoreError(e, "select") from e
        return list(result.scalars().all())

    async def get_post(self, post_id: PostId) -> Post | None:
        if post_id > MAX_STORE_ID:
            return None
        try:
            result = await self._db.execute(
                select(Post).where(Post.id == post_id),
            )
        except SQLAlchemyError as e:
            raise StoreError(e, "select") from e
        return result.scalar_one_or_none()

    async def insert_post(
        self,
        title: str,
        content: str | None,
        author_id: UserId,
        published: bool = False,
    ) -> Post:
        if author_id > MAX_STORE_ID:
            raise StoreError(
                ValueError(f"author_id {author_id} exceeds INTEGER range"), "insert",
            )
        post = Post(
            title=title, content=content,
            author_id=author_id, published=published,
        )
        self._db.add(post)
        try:
            await self._db.commit()
            await self._db.refresh(post)
        except SQLAlchemyError as e:
            await self._db.rollback()
            raise map_store_error(e, "insert", "post", "title") from e
        logger.info("Post created", extra={"resource": "post", "operation": "insert"})
        return post
