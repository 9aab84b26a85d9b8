"""
NoteLite Backend — Database Session Management
================================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
Why:   Centralizes all database connection logic in one place.
How:   Creates an async engine with connection pooling, provides a session
       dependency that auto-commits on success and auto-rolls-back on error.
Who:   Used by route handlers via FastAPI's dependency injection system and
       by the bootstrap loader at startup.
When:  Engine is created at module import; sessions are created per-request.

Connection Pooling Strategy:
    PostgreSQL (asyncpg):
        pool_size / max_overflow from settings, pool_pre_ping to catch stale
        connections, pool_recycle=3600 to drop long-lived ones.
    SQLite (aiosqlite):
        NullPool. Each session opens its own connection to the file, which
        keeps tests independent of the event loop that created a connection.
        Every connection also gets a Unicode-aware lower(), used by the
        case-insensitive title search.
"""

from typing import Any, AsyncGenerator, Dict, Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from notelite.config import settings


def _engine_options() -> Dict[str, Any]:
    """Pool arguments for the configured backend."""
    options: Dict[str, Any] = {
        # Echo SQL queries in DEBUG mode for development visibility
        "echo": settings.log_level == "DEBUG",
    }
    if settings.is_sqlite:
        options["poolclass"] = NullPool
    else:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return options


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(settings.database_url, **_engine_options())


def _unicode_lower(value: Optional[str]) -> Optional[str]:
    return value.lower() if value is not None else None


if settings.is_sqlite:
    # SQLite's built-in lower() only folds ASCII; title search relies on
    # lower() folding the same way str.lower() does on every backend
    @event.listens_for(engine.sync_engine, "connect")
    def _register_sqlite_functions(dbapi_conn, connection_record) -> None:
        dbapi_conn.create_function("lower", 1, _unicode_lower, deterministic=True)


# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: attributes stay readable after commit, so the
# response can be serialized after the dependency has committed
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object, which Alembic reads for migrations.
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler (the handler performs queries)
        3. On success: commits the transaction
        4. On error: rolls back the transaction
        5. Always: closes the session (returns connection to pool)

    Every note operation touches exactly one row, so one request maps to
    one short transaction.

    Raises:
        Any database exceptions are propagated to the global error handler,
        which returns appropriate HTTP status codes.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine() -> None:
    """
    Gracefully closes all connections in the pool.

    Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
