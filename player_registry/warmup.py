"""Startup warmup so the first request does not pay connection setup costs."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from player_registry.db.models import Base

logger = logging.getLogger(__name__)


async def warmup_database(
    resolve_db_type: Callable[[], str] | None = None,
    resolve_engine: Callable[[], AsyncEngine] | None = None,
) -> None:
    """Open a pooled connection and issue ``SELECT 1``.

    SQLite databases are local development targets without migrations, so the
    ``players`` table is created on the same connection when missing.
    Failures are logged rather than raised; the first real query will surface
    them to the caller.
    """
    try:
        if resolve_db_type is None:
            from player_registry.db.connection import get_database_type as resolve_db_type

        if resolve_engine is None:
            from player_registry.db.connection import get_engine as resolve_engine

        start = time.perf_counter()
        db_type = resolve_db_type()
        engine = resolve_engine()

        async with engine.begin() as conn:
            if db_type == "sqlite":
                await conn.run_sync(Base.metadata.create_all)
                logger.info("SQLite schema ensured")
            await conn.execute(text("SELECT 1"))

        elapsed = (time.perf_counter() - start) * 1000
        logger.info("Database connection warmed up (%.0fms)", elapsed)
    except Exception as exc:
        logger.warning("Database warmup failed: %s", exc)


async def warmup_all(
    resolve_db_type: Callable[[], str] | None = None,
    resolve_engine: Callable[[], AsyncEngine] | None = None,
) -> None:
    """Run every warmup step before the application accepts traffic."""

    logger.info("Starting warmup...")
    start = time.perf_counter()
    await warmup_database(resolve_db_type=resolve_db_type, resolve_engine=resolve_engine)
    elapsed = (time.perf_counter() - start) * 1000
    logger.info("Startup warmup complete (%.0fms)", elapsed)
