"""
Employee App Backend: Database Handle & Session Management
=============================================================

What:  Async SQLAlchemy engine wrapper, schema bootstrap, and FastAPI session dependency.
How:   A `Database` object owns one async engine (and so one connection pool)
       plus a session factory. It is constructed explicitly at startup, stored
       on `app.state.database`, and reached by handlers through `get_db_session`.
Who:   main.py builds and disposes it; routes receive sessions from it.
When:  Engine created once per application; sessions created per request.

Connection Pooling:
    pool_size / max_overflow / pool_pre_ping come from Settings and are only
    applied to server databases. SQLite engines keep SQLAlchemy's default pool.
"""

import logging
from typing import Any, AsyncGenerator, Dict

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from employee_app.config import Settings

logger = logging.getLogger(__name__)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Every model registers its table on `Base.metadata`, which is what the
    schema bootstrap creates.
    """
    pass


class Database:
    """
    Handle around an async engine and its session factory.

    Attributes:
        url:     The SQLAlchemy URL the engine connects to
        engine:  AsyncEngine owning the connection pool
        session_factory: async_sessionmaker bound to the engine

    expire_on_commit=False keeps ORM attributes readable after commit, so
    handlers can serialize rows once the transaction is closed.
    """

    def __init__(self, url: str, **engine_kwargs: Any):
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build a Database using the pool options from Settings."""
        engine_kwargs: Dict[str, Any] = {
            # Echo SQL only when debugging
            "echo": settings.log_level == "DEBUG",
        }
        if not settings.is_sqlite:
            engine_kwargs.update(
                pool_size=settings.db_pool_size,
                max_overflow=settings.db_max_overflow,
                pool_pre_ping=settings.db_pool_pre_ping,
                pool_recycle=3600,
            )
        return cls(settings.database_url, **engine_kwargs)

    async def create_schema(self) -> None:
        """
        Create every registered table that does not exist yet.

        What:  The idempotent schema bootstrap (CREATE TABLE IF NOT EXISTS semantics).
        When:  Awaited during startup, before the server accepts requests.
        How:   MetaData.create_all with checkfirst, run inside one transaction.
               Existing tables and their rows are left untouched.
        """
        # Registers the employees table on Base.metadata
        from employee_app.models import employee  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)
        logger.info("Database schema ready")

    async def ping(self) -> None:
        """Run SELECT 1; raises whatever the driver raises when unreachable."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def dispose(self) -> None:
        """
        What:  Gracefully closes all connections in the pool.
        When:  Called during application shutdown (lifespan handler).
        """
        await self.engine.dispose()


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Looks up the Database handle the application was started with
        2. Opens a session and yields it to the route handler
        3. On success: commits the transaction
        4. On error: rolls back and re-raises for the global error handlers
        5. Always: closes the session (returns the connection to the pool)

    Example usage in a route:
        @router.get("/employees")
        async def list_employees(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
