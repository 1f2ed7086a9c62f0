"""Settings: driver rewriting and defaults."""

from app.config import Settings


def test_postgres_url_rewritten_to_asyncpg():
    s = Settings(database_url="postgresql://u:p@db:5432/app")
    assert s.database_url == "postgresql+asyncpg://u:p@db:5432/app"


def test_sqlite_url_rewritten_to_aiosqlite():
    s = Settings(database_url="sqlite:///./local.db")
    assert s.database_url == "sqlite+aiosqlite:///./local.db"


def test_async_urls_left_untouched():
    url = "sqlite+aiosqlite:///:memory:"
    assert Settings(database_url=url).database_url == url


def test_cors_defaults_include_local_frontend():
    s = Settings()
    assert "http://localhost:5173" in s.cors_origins
    assert s.api_prefix == "/api"


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("API_PREFIX", "/v1")
    monkeypatch.setenv("CORS_ORIGINS", '["https://example.com"]')
    s = Settings()
    assert s.api_prefix == "/v1"
    assert s.cors_origins == ["https://example.com"]
