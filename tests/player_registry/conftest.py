"""Shared fixtures for asynchronous database access and HTTP-level tests."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from datetime import datetime
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from player_registry.db.connection import get_db
from player_registry.db.models import Base, Player, Profession, Race
from player_registry.services.levels import level_progress


@pytest_asyncio.fixture
async def session() -> AsyncIterator[AsyncSession]:
    """Provide an in-memory SQLite session for integration-style tests."""
    pytest.importorskip("aiosqlite")
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", future=True)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async_session = async_sessionmaker(engine, expire_on_commit=False)
    async with async_session() as db_session:
        yield db_session
        if db_session.in_transaction():
            await db_session.rollback()
    await engine.dispose()


def make_player(
    name: str,
    *,
    title: str = "Adventurer",
    race: Race = Race.HUMAN,
    profession: Profession = Profession.WARRIOR,
    birthday: datetime = datetime(2005, 6, 1),
    banned: bool = False,
    experience: int = 0,
) -> Player:
    """Build an unsaved :class:`Player` with consistent level fields."""

    level, until_next_level = level_progress(experience)
    return Player(
        name=name,
        title=title,
        race=race,
        profession=profession,
        birthday=birthday,
        banned=banned,
        experience=experience,
        level=level,
        until_next_level=until_next_level,
    )


@pytest.fixture
def player_factory():
    """Expose :func:`make_player` to tests as a fixture."""

    return make_player


@pytest.fixture
def client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    """Provide a ``TestClient`` backed by a throwaway SQLite file.

    The application lifespan creates the schema through its SQLite warmup, and
    every request receives a session from an engine bound to the temporary
    database instead of the configured one.
    """

    pytest.importorskip("aiosqlite")
    import player_registry.main as registry_main

    url = f"sqlite+aiosqlite:///{tmp_path / 'players.db'}"
    engine = create_async_engine(url, poolclass=NullPool)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)

    async def override_get_db() -> AsyncIterator[AsyncSession]:
        async with session_factory() as db_session:
            try:
                yield db_session
                await db_session.commit()
            except Exception:
                await db_session.rollback()
                raise

    monkeypatch.setattr(registry_main, "get_engine", lambda: engine)
    monkeypatch.setattr(registry_main, "get_database_type", lambda: "sqlite")
    monkeypatch.setattr(registry_main, "get_database_url", lambda: url)
    registry_main.app.dependency_overrides[get_db] = override_get_db

    try:
        with TestClient(registry_main.app) as test_client:
            yield test_client
    finally:
        registry_main.app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def thrall_payload() -> dict[str, Any]:
    """Valid creation body for an orc warrior with 2,000 experience."""

    return {
        "name": "Thrall",
        "title": "Warchief",
        "race": "ORC",
        "profession": "WARRIOR",
        "birthday": 988_059_600_000,
        "experience": 2000,
    }
