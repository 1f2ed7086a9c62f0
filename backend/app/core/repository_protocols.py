"""Boundary Protocols: contracts between the request handlers and the store.

Invariants:
    - Handlers depend on these Protocols, never on a concrete repository class
    - "Not found" is a None return, never an exception
    - insert_* raise UniqueConstraintViolation on duplicates, StoreError otherwise

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass any fake
    - Methods are async because implementations do IO
"""

from typing import Protocol

from app.core.domain_types import PostId, UserId


class UserLike(Protocol):
    """Structural contract for User rows handed to the response layer."""
    id: int
    name: str
    email: str


class PostLike(Protocol):
    """Structural contract for Post rows handed to the response layer."""
    id: int
    title: str
    content: str | None
    author_id: int
    published: bool


class UserRepository(Protocol):
    """Contract for user persistence, implemented in db/."""
    async def list_users(self) -> list[UserLike]: ...
    async def get_user(self, user_id: UserId) -> UserLike | None: ...
    async def insert_user(self, name: str, email: str) -> UserLike: ...


class PostRepository(Protocol):
    """Contract for post persistence, implemented in db/."""
    async def list_posts(
        self, author_id: UserId | None = None,
    ) -> list[PostLike]: ...
    async def get_post(self, post_id: PostId) -> PostLike | None: ...
    async def insert_post(
        self,
        title: str,
        content: str | None,
        author_id: UserId,
        published: bool = False,
    ) -> PostLike: ...
