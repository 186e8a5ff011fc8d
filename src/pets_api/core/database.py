"""Database connection and session management.

This module provides async session management using SQLAlchemy 2.0. Each
request gets its own ``AsyncSession`` that is released when the request
finishes; nothing is committed implicitly, the handlers commit explicitly.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from pets_api.core.config import DatabaseConfig, get_settings

logger = logging.getLogger(__name__)


def _set_sqlite_pragma(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """Turn on foreign key enforcement for every new SQLite connection.

    SQLite ships with foreign keys disabled and the setting is per
    connection, so it has to be applied on connect.
    """
    event.listen(engine.sync_engine, "connect", _set_sqlite_pragma)


class DatabaseManager:
    """Owns the async engine and the session factory.

    The engine is created lazily on first use so that building the manager
    never opens a connection.
    """

    def __init__(self, config: DatabaseConfig):
        self.config = config
        self._engine: Optional[AsyncEngine] = None
        self._sessionmaker: Optional[async_sessionmaker[AsyncSession]] = None

    def _engine_options(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {"echo": self.config.echo}
        # SQLite engines use single-connection pools that reject sizing options
        if not self.config.is_sqlite:
            options.update(
                pool_size=self.config.pool_size,
                max_overflow=self.config.max_overflow,
                pool_pre_ping=True,  # Verify connections before using
                pool_recycle=3600,  # Recycle connections after 1 hour
            )
        return options

    @property
    def engine(self) -> AsyncEngine:
        """Get or create the async engine."""
        if self._engine is None:
            self._engine = create_async_engine(self.config.url, **self._engine_options())
            if self.config.is_sqlite:
                enable_sqlite_foreign_keys(self._engine)
        return self._engine

    @property
    def sessionmaker(self) -> async_sessionmaker[AsyncSession]:
        """Get or create the session factory."""
        if self._sessionmaker is None:
            self._sessionmaker = async_sessionmaker(
                self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )
        return self._sessionmaker

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Open a session scoped to the ``async with`` block.

        Uncommitted work is rolled back if the block raises; the session is
        always closed on exit.
        """
        async with self.sessionmaker() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def create_tables(self) -> None:
        """Create all tables registered on the declarative base."""
        from pets_api.models import Base

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Dispose of the engine's connection pool."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._sessionmaker = None


_manager: Optional[DatabaseManager] = None


def configure_database(config: DatabaseConfig) -> DatabaseManager:
    """Replace the process-wide database manager."""
    global _manager
    _manager = DatabaseManager(config)
    return _manager


def get_database_manager() -> DatabaseManager:
    """Get the process-wide database manager, building it from settings."""
    global _manager
    if _manager is None:
        _manager = DatabaseManager(get_settings().database)
    return _manager


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for FastAPI to get a request-scoped database session.

    Yields:
        AsyncSession: Database session for the request
    """
    async with get_database_manager().session() as session:
        yield session


async def init_db() -> None:
    """Create database tables if they don't exist.

    Should be called on application startup.
    """
    manager = get_database_manager()
    logger.info("Creating database tables")
    await manager.create_tables()


async def close_db() -> None:
    """Close database connections.

    Should be called on application shutdown.
    """
    if _manager is not None:
        await _manager.dispose()
