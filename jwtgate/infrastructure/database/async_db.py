from __future__ import annotations

"""
Asynchronous Database Utilities Module

Builds the async SQLAlchemy engine and session factory used by the SQL store
adapters. Engines are created from an explicit URL so that tests can point the
stores at a throwaway SQLite file while production uses PostgreSQL through
asyncpg.

**Security Note**: Configure SSL in the DATABASE_URL when connecting over
untrusted networks, and never log the URL since it may contain credentials.

Key Components:
    - create_engine: Builds an async engine for a database URL.
    - create_session_factory: Builds an ``async_sessionmaker`` bound to an engine.
    - create_db_and_tables: Creates every SQLModel table on an engine.
"""

import structlog
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel

# Register every table on SQLModel.metadata.
from jwtgate.domain import entities  # noqa: F401

logger = structlog.get_logger(__name__)


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create the asynchronous engine for ``database_url``.

    Args:
        database_url: Async SQLAlchemy URL (``postgresql+asyncpg://`` or
            ``sqlite+aiosqlite://``).
        echo: Whether SQL statements are echoed.

    Returns:
        AsyncEngine: The configured engine.
    """
    url = make_url(database_url)
    logger.info("Creating database engine", driver=url.drivername, database=url.database)
    return create_async_engine(url, echo=echo, future=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Create a session factory bound to ``engine``.

    Sessions do not expire objects on commit so that entities returned by the
    stores stay readable after their transaction ends.
    """
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


async def create_db_and_tables(engine: AsyncEngine) -> None:
    """
    Create all tables registered on ``SQLModel.metadata``.

    Existing tables are left untouched.
    """
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database tables created")
