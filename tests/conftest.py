"""
NoteLite Backend — Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Provides reusable test infrastructure (SQLite schema, sessions,
       authenticated and anonymous API clients).
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── db_schema: creates the notes table in a temporary SQLite file, drops it after
    ├── db_session: AsyncSession on that schema (flushes only, never commits)
    ├── mock_db_session: Mock session for fault-injection tests (no DB at all)
    ├── test_client: HTTPX AsyncClient with valid Basic credentials
    └── anon_client: HTTPX AsyncClient without credentials
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from notelite.security import hash_password


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

TEST_USERNAME = "tester"
TEST_PASSWORD = "correct horse battery staple"

# Override settings BEFORE notelite.config is imported anywhere
_db_dir = tempfile.mkdtemp(prefix="notelite_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_db_dir}/test.db"
os.environ["AUTH_USERNAME"] = TEST_USERNAME
os.environ["AUTH_PASSWORD_HASH"] = hash_password(TEST_PASSWORD)
os.environ["SEED_ON_STARTUP"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_schema():
    """
    Creates the schema before the test and drops it afterwards.

    Uses the application's own engine, so API requests made through
    test_client see the same tables.
    """
    from notelite.database import Base, engine
    from notelite.models.note import Note  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_schema):
    """A real AsyncSession on the test schema."""
    from notelite.database import async_session_factory

    async with async_session_factory() as session:
        yield session


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_db_down(mock_db_session):
            mock_db_session.execute.side_effect = RuntimeError("connection reset")
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# HTTP Client Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def credentials():
    return (TEST_USERNAME, TEST_PASSWORD)


@pytest_asyncio.fixture
async def test_client(db_schema, credentials):
    """
    HTTPX AsyncClient talking to the FastAPI app with valid Basic auth.

    ASGITransport does not run the lifespan, so no seed data is loaded.
    """
    from notelite.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test", auth=credentials) as client:
        yield client


@pytest_asyncio.fixture
async def anon_client(db_schema):
    """HTTPX AsyncClient that sends no credentials."""
    from notelite.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
