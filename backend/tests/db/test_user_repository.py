"""User Repository: list/get/insert against a real in-memory SQLite store.

Invariants tested:
    - list_users is empty on a fresh store and ordered by insertion afterwards
    - get_user returns None for an absent id, including one beyond the INTEGER range
    - insert_user assigns increasing ids and timestamps
    - duplicate email raises UniqueConstraintViolation and persists nothing
    - other SQLAlchemy failures surface as StoreError
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from app.core.domain_types import MAX_STORE_ID
from app.core.errors import StoreError, UniqueConstraintViolation
from app.db.user_repository import SqlAlchemyUserRepository
from app.models import User


@pytest.fixture
def repo(test_db):
    return SqlAlchemyUserRepository(test_db)


async def _count(db) -> int:
    return (await db.execute(select(func.count()).select_from(User))).scalar_one()


async def test_list_users_empty_store(repo):
    assert await repo.list_users() == []


async def test_insert_assigns_id_and_timestamps(repo):
    user = await repo.insert_user("Alice", "alice@example.com")
    assert isinstance(user.id, int) and user.id > 0
    assert user.name == "Alice"
    assert user.email == "alice@example.com"
    assert user.created_at is not None
    assert user.updated_at is not None


async def test_ids_increase_and_list_keeps_insertion_order(repo):
    a = await repo.insert_user("A", "a@example.com")
    b = await repo.insert_user("B", "b@example.com")
    c = await repo.insert_user("C", "c@example.com")
    assert a.id < b.id < c.id
    assert [u.email for u in await repo.list_users()] == [
        "a@example.com", "b@example.com", "c@example.com",
    ]


async def test_get_user_found_and_missing(repo):
    user = await repo.insert_user("Alice", "alice@example.com")
    found = await repo.get_user(user.id)
    assert found is not None and found.email == "alice@example.com"
    assert await repo.get_user(user.id + 100) is None


async def test_get_user_beyond_integer_range_returns_none(repo):
    assert await repo.get_user(MAX_STORE_ID + 1) is None


async def test_duplicate_email_raises_unique_violation(repo, test_db):
    await repo.insert_user("Alice", "alice@example.com")
    with pytest.raises(UniqueConstraintViolation) as exc_info:
        await repo.insert_user("Other Alice", "alice@example.com")
    assert exc_info.value.field == "email"
    assert await _count(test_db) == 1


async def test_session_usable_after_duplicate(repo):
    await repo.insert_user("Alice", "alice@example.com")
    with pytest.raises(UniqueConstraintViolation):
        await repo.insert_user("Alice", "alice@example.com")
    bob = await repo.insert_user("Bob", "bob@example.com")
    assert bob.id > 0


async def test_query_failure_maps_to_store_error(repo, test_db, monkeypatch):
    async def broken_execute(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(test_db, "execute", broken_execute)
    with pytest.raises(StoreError) as exc_info:
        await repo.list_users()
    assert exc_info.value.operation == "select"
    with pytest.raises(StoreError):
        await repo.get_user(1)


async def test_commit_failure_maps_to_store_error(repo, test_db, monkeypatch):
    async def broken_commit():
        raise OperationalError("INSERT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(test_db, "commit", broken_commit)
    with pytest.raises(StoreError) as exc_info:
        await repo.insert_user("Alice", "alice@example.com")
    assert not isinstance(exc_info.value, UniqueConstraintViolation)
    assert exc_info.value.operation == "insert"
