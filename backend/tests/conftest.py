"""Root conftest: shared fixtures for an in-memory database and the HTTP client.

Invariants:
    - Every test gets a fresh in-memory SQLite database (tables created up front)
    - The client's app uses that database through app.state.db_manager
    - dependency_overrides are cleared after each client test

Design Decisions:
    - httpx ASGITransport does not run lifespan, so the fixture installs the
      session manager itself
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.infrastructure.database import DatabaseSessionManager  # noqa: E402
from app.main import app  # noqa: E402


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_all()
    yield manager
    await manager.close()


@pytest.fixture
async def test_db(db_manager):
    async with db_manager.session() as session:
        yield session


@pytest.fixture
async def client(db_manager):
    """FastAPI test client bound to the per-test database."""
    original_manager = getattr(app.state, "db_manager", None)
    app.state.db_manager = db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.db_manager = original_manager
