"""Pytest configuration and fixtures."""

from typing import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from pets_api.api.main import create_app
from pets_api.core.config import Settings
from pets_api.core.database import enable_sqlite_foreign_keys, get_session
from pets_api.models import Base, User


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with overrides."""
    return Settings(
        app={"environment": "test"},
        database={"url": "sqlite+aiosqlite:///:memory:"},
        logging={"level": "WARNING"},
    )


@pytest_asyncio.fixture
async def engine():
    """Create an in-memory database engine with all tables."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def seed_users(session_factory):
    """Seed John and Jane Doe."""
    async with session_factory() as session:
        session.add_all(
            [
                User(id=1, first_name="John", last_name="Doe", age=30),
                User(id=2, first_name="Jane", last_name="Doe", age=25),
            ]
        )
        await session.commit()


@pytest_asyncio.fixture
async def db_session(session_factory, seed_users) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session on the seeded database."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(session_factory, seed_users, test_settings) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with the session dependency overridden."""
    app = create_app(test_settings)

    async def override_get_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def failing_commit_client(
    session_factory, seed_users, test_settings
) -> AsyncGenerator[AsyncClient, None]:
    """Test client whose sessions fail on every commit."""
    app = create_app(test_settings)

    async def override_get_session():
        async with session_factory() as session:
            session.commit = AsyncMock(
                side_effect=OperationalError("COMMIT", {}, Exception("disk I/O error"))
            )
            yield session

    app.dependency_overrides[get_session] = override_get_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
