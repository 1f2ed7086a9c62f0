"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Every setting can be overridden from the environment or a .env file
    - get_settings() is cached (lru_cache): single instance per process
    - database_url always names an async driver (aiosqlite / asyncpg)

Design Decisions:
    - Defaults work out of the box: local SQLite file, localhost CORS
    - create_app(settings) takes an explicit Settings; get_settings() only feeds app.main
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    app_name: str = "EdgeCRUD API"
    environment: str = "development"
    api_prefix: str = "/api"

    # Database
    database_url: str = "sqlite+aiosqlite:///./edgecrud.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def use_async_driver(cls, v: str) -> str:
        """Rewrite sync driver URLs to their async equivalents."""
        if isinstance(v, str):
            if v.startswith("postgresql://"):
                return v.replace("postgresql://", "postgresql+asyncpg://", 1)
            if v.startswith("sqlite://"):
                return v.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    create_tables_on_startup: bool = True

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]
    cors_origin_regex: str | None = (
        r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$|^https://[\w.-]+\.pages\.dev$"
    )
    cors_allow_credentials: bool = True

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
