"""Main FastAPI application.

Run with::

    uvicorn pets_api.api.main:app --reload
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from structlog import get_logger

from pets_api.api.exceptions import setup_exception_handlers
from pets_api.api.middleware.logging import LoggingMiddleware
from pets_api.api.routes import health, pets, users
from pets_api.core.config import Settings, get_settings
from pets_api.core.database import close_db, configure_database, init_db
from pets_api.core.logging import setup_logging

logger = get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup and release the connection pool on shutdown."""
    await init_db()
    logger.info("application_started", name=app.title, version=app.version)
    try:
        yield
    finally:
        await close_db()
        logger.info("application_stopped")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        settings: Settings to build the app with; defaults to ``get_settings()``

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()

    setup_logging(settings.logging.level, settings.logging.json_format)
    configure_database(settings.database)

    app = FastAPI(
        title=settings.app.name,
        description="CRUD API for users and their pets",
        version=settings.app.version,
        debug=settings.app.debug,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        lifespan=lifespan,
    )

    # Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=settings.api.cors_allow_credentials,
        allow_methods=settings.api.cors_allow_methods,
        allow_headers=settings.api.cors_allow_headers,
    )

    app.add_middleware(LoggingMiddleware)

    setup_exception_handlers(app, settings)

    # Routes
    app.include_router(health.router, tags=["health"])
    app.include_router(users.router, prefix=f"{settings.api.prefix}/users", tags=["users"])
    app.include_router(pets.router, prefix=f"{settings.api.prefix}/pets", tags=["pets"])

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": settings.app.name,
            "version": settings.app.version,
            "docs": "/docs" if not settings.is_production else None,
        }

    return app


app = create_app()
