"""Post Repository: list (optionally by author), get and insert."""

import pytest

from app.core.domain_types import MAX_STORE_ID
from app.core.errors import StoreError
from app.db.post_repository import SqlAlchemyPostRepository
from app.db.user_repository import SqlAlchemyUserRepository


@pytest.fixture
def posts(test_db):
    return SqlAlchemyPostRepository(test_db)


@pytest.fixture
async def author(test_db):
    return await SqlAlchemyUserRepository(test_db).insert_user(
        "Alice", "alice@example.com",
    )


async def test_list_posts_empty(posts):
    assert await posts.list_posts() == []


async def test_insert_post_defaults(posts, author):
    post = await posts.insert_post("Hello", None, author.id)
    assert post.id > 0
    assert post.author_id == author.id
    assert post.published is False
    assert post.content is None


async def test_list_posts_filters_by_author(posts, author, test_db):
    bob = await SqlAlchemyUserRepository(test_db).insert_user("Bob", "bob@example.com")
    await posts.insert_post("A1", "x", author.id, True)
    await posts.insert_post("B1", None, bob.id)
    await posts.insert_post("A2", None, author.id)

    assert [p.title for p in await posts.list_posts()] == ["A1", "B1", "A2"]
    assert [p.title for p in await posts.list_posts(author.id)] == ["A1", "A2"]


async def test_get_post_missing_returns_none(posts):
    assert await posts.get_post(1) is None


async def test_unknown_author_is_store_error(posts):
    with pytest.raises(StoreError):
        await posts.insert_post("Orphan", None, 999)
    assert await posts.list_posts() == []


async def test_ids_beyond_integer_range_are_absent(posts, author):
    await posts.insert_post("A", None, author.id)
    assert await posts.get_post(MAX_STORE_ID + 1) is None
    assert await posts.list_posts(MAX_STORE_ID + 1) == []


async def test_insert_with_author_beyond_integer_range_is_store_error(posts):
    with pytest.raises(StoreError):
        await posts.insert_post("Orphan", None, MAX_STORE_ID + 1)
    assert await posts.list_posts() == []
