"""
Pytest fixtures for testing.

Tests run against an in-memory SQLite database by default. Set
TEST_WITH_POSTGRES=1 to run the same suite against PostgreSQL in a
testcontainers-managed container (requires Docker).
"""
import os
from collections.abc import AsyncGenerator, Generator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from models.base import Base

SQLITE_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def _use_postgres() -> bool:
    return os.environ.get("TEST_WITH_POSTGRES", "").lower() in {"1", "true", "yes"}


@pytest.fixture(scope="session")
def database_url() -> Generator[str]:
    """
    Set DATABASE_URL for the test session.

    This must be set before any app imports that trigger Settings validation.
    """
    if not _use_postgres():
        os.environ["DATABASE_URL"] = SQLITE_DATABASE_URL
        yield SQLITE_DATABASE_URL
        return

    from testcontainers.postgres import PostgresContainer

    with PostgresContainer("postgres:16", driver="asyncpg") as postgres:
        url = postgres.get_connection_url()
        os.environ["DATABASE_URL"] = url
        yield url


@pytest.fixture
async def async_engine(database_url: str) -> AsyncGenerator[AsyncEngine]:
    """
    Create a fresh schema for each test.

    SQLite: StaticPool keeps a single connection so every session sees the same
    in-memory database; disposing the engine throws it away.
    PostgreSQL: tables and the id sequence are dropped after the test, so ids
    start at 1 again.
    """
    if database_url.startswith("sqlite"):
        engine = create_async_engine(database_url, echo=False, poolclass=StaticPool)
    else:
        engine = create_async_engine(database_url, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    if not database_url.startswith("sqlite"):
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db_session(async_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Create an async session shared by the test and the app under test."""
    session_factory = async_sessionmaker(
        bind=async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(
    db_session: AsyncSession,
) -> AsyncGenerator[AsyncClient]:
    """Create a test client with database session override."""
    # Clear the settings cache so it picks up DATABASE_URL from environment
    from core.config import get_settings

    get_settings.cache_clear()

    from api.main import app
    from db.session import get_async_session

    async def override_get_async_session() -> AsyncGenerator[AsyncSession]:
        yield db_session

    app.dependency_overrides[get_async_session] = override_get_async_session

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()
