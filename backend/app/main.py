"""EdgeCRUD API: FastAPI application entry point.

Invariants:
    - create_app(settings) is the only place routes, middleware and handlers are wired
    - The store handle (DatabaseSessionManager) lives on app.state, created in lifespan
    - Global error handlers map every failure to the response envelope
    - CORS configured from settings (explicit origins plus an origin regex)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import health, hello, posts, users
from app.config import Settings, get_settings
from app.infrastructure.database import init_db
from app.infrastructure.observability import log_requests, setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings) -> FastAPI:
    """Build the application from an explicit settings object."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        db_manager = init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        if settings.create_tables_on_startup:
            await db_manager.create_all()
        app.state.db_manager = db_manager
        logger.info(f"{settings.app_name} started ({settings.environment})")
        yield
        await db_manager.close()
        logger.info(f"{settings.app_name} shutting down")

    app = FastAPI(title=settings.app_name, version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_origin_regex=settings.cors_origin_regex,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)

    app.include_router(health.root_router)
    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(hello.router, prefix=settings.api_prefix)
    app.include_router(users.router, prefix=settings.api_prefix)
    app.include_router(posts.router, prefix=settings.api_prefix)

    register_error_handlers(app)
    return app


app = create_app(get_settings())
