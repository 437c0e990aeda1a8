"""
db.py — async SQLAlchemy engine and session singletons.

Usage:
    from swc_shared.db import get_engine, get_sessionmaker, init_db

    await init_db()                           # create tables (idempotent)
    async with get_sessionmaker()() as session:
        ...

    # FastAPI dependency
    async def route(session: AsyncSession = Depends(get_session)): ...

SQLite (the local default) runs through aiosqlite with foreign keys switched
on per connection; Postgres runs through asyncpg.
"""

from __future__ import annotations

import threading
from collections.abc import AsyncIterator
from typing import Optional

import structlog
from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from swc_shared.config import settings

logger = structlog.get_logger(__name__)


class Base(DeclarativeBase):
    pass


# ---------------------------------------------------------------------------
# Engine: one per process, guarded by a lock
# ---------------------------------------------------------------------------
_engine_lock = threading.Lock()
_engine: Optional[AsyncEngine] = None
_sessionmaker: Optional[async_sessionmaker[AsyncSession]] = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_engine() -> AsyncEngine:
    """
    Return the singleton async engine for settings.database_url.

    SQLite engines use NullPool so every session gets its own connection;
    Postgres engines use a pool sized by settings.db_pool_size.
    """
    global _engine, _sessionmaker

    with _engine_lock:
        if _engine is None:
            url = settings.database_url
            if settings.is_sqlite:
                _engine = create_async_engine(
                    url, echo=settings.db_echo, poolclass=NullPool,
                )
                event.listen(_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
            else:
                _engine = create_async_engine(
                    url,
                    echo=settings.db_echo,
                    pool_size=settings.db_pool_size,
                    pool_pre_ping=True,
                )
            _sessionmaker = async_sessionmaker(
                _engine, class_=AsyncSession, expire_on_commit=False,
            )
            logger.info("db_engine_created", dialect=_engine.dialect.name)
        return _engine


def get_sessionmaker() -> async_sessionmaker[AsyncSession]:
    get_engine()
    if _sessionmaker is None:
        raise RuntimeError("Session factory was reset while the engine was being created")
    return _sessionmaker


async def get_session() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency yielding one session per request."""
    async with get_sessionmaker()() as session:
        yield session


async def init_db() -> None:
    """Create all tables (safe to call multiple times)."""
    # Table classes register themselves on Base.metadata when imported
    import swc_shared.orm  # noqa: F401

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def ping() -> bool:
    """Return True if the database answers a trivial query."""
    async with get_engine().connect() as conn:
        await conn.execute(text("SELECT 1"))
    return True


async def dispose_engine() -> None:
    """Close pooled connections and forget the singleton."""
    global _engine, _sessionmaker
    engine = _engine
    with _engine_lock:
        _engine = None
        _sessionmaker = None
    if engine is not None:
        await engine.dispose()


def reset_engine() -> None:
    """Forget the singleton without awaiting disposal (useful in tests)."""
    global _engine, _sessionmaker
    with _engine_lock:
        _engine = None
        _sessionmaker = None
