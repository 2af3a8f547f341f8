from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from player_registry.settings import POSTGRES_ASYNC_PREFIX, get_settings

logger = logging.getLogger(__name__)


def get_database_url() -> str:
    """Return the async database URL resolved from application settings."""

    return get_settings().resolved_database_url


def get_database_type() -> str:
    """Return the active database backend identifier (``postgresql``/``sqlite``)."""

    return get_settings().database_type


def _ensure_sqlite_directory(url: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""

    _, _, path = url.partition(":///")
    if path and path != ":memory:":
        Path(path).parent.mkdir(parents=True, exist_ok=True)


def create_engine(url: str | None = None) -> AsyncEngine:
    """Create the async SQLAlchemy engine.

    PostgreSQL gets a warm connection pool; SQLite (local development and the
    test-suite) keeps SQLAlchemy's defaults because pooling options such as
    ``pool_size`` are not accepted by its pool class.
    """

    url = url or get_database_url()

    if url.startswith(POSTGRES_ASYNC_PREFIX):
        engine = create_async_engine(
            url,
            echo=False,
            pool_size=10,  # Maintain 10 warm connections
            max_overflow=20,  # Allow up to 30 total connections
            pool_pre_ping=True,  # Validate connections before use
            pool_recycle=1800,  # Recycle connections every 30 min
            pool_timeout=30,  # Timeout for getting connection from pool
        )
    else:
        _ensure_sqlite_directory(url)
        engine = create_async_engine(url, echo=False)

    try:
        from player_registry.monitoring import setup_query_monitoring

        setup_query_monitoring(
            engine,
            slow_query_threshold=get_settings().slow_query_threshold,
        )
    except Exception as exc:  # pragma: no cover - monitoring is optional at runtime
        logger.warning("Failed to enable query monitoring: %s", exc)

    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


# Global engine/session instances for FastAPI dependency injection
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def get_engine() -> AsyncEngine:
    """Get or create the global engine instance."""
    global _engine
    if _engine is None:
        _engine = create_engine()
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Lazily create a session factory bound to the shared engine."""
    global _session_factory
    if _session_factory is None:
        _session_factory = create_session_factory(get_engine())
    return _session_factory


async def dispose_engine() -> None:
    """Dispose the shared engine so pooled connections close on shutdown."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None


async def get_db() -> AsyncIterator[AsyncSession]:
    """
    Dependency to provide database session.

    Commits when the request handler finishes and rolls back on any error.
    """
    async with get_session_factory()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


@asynccontextmanager
async def get_async_session_context() -> AsyncIterator[AsyncSession]:
    """
    Async context manager for scripts/CLI tasks that need manual session control.
    """
    async with get_session_factory()() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
