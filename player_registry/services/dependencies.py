"""FastAPI dependency wiring for the player service.

Keeping dependency factories out of the service modules leaves the latter
free of web-layer concerns, so tests and scripts can build services directly.
"""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from player_registry.db.connection import get_db
from player_registry.db.repositories import PlayerRepository
from player_registry.services.player_service import PlayerService


def get_player_service(session: AsyncSession = Depends(get_db)) -> PlayerService:
    """Provide a :class:`PlayerService` bound to the request's session."""

    return PlayerService(PlayerRepository(session))


__all__ = ["get_player_service"]
