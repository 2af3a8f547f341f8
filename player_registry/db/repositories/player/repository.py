"""SQLAlchemy-backed store for player records."""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from player_registry.db.models import Player
from player_registry.db.repositories.player.paging import (
    PageRequest,
    PlayerPage,
    count_select,
    paged_select,
)

logger = logging.getLogger(__name__)


class PlayerRepository:
    """Query-by-predicate, pagination, and CRUD-by-key over ``players``."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def query(
        self, predicate: ColumnElement[bool], page: PageRequest
    ) -> PlayerPage:
        """Return the requested page of matches together with the total count."""

        result = await self._session.execute(paged_select(predicate, page))
        items = list(result.scalars().all())
        total = await self.count_where(predicate)
        logger.debug(
            "Fetched %d of %d players (page=%d, size=%d, order=%s)",
            len(items),
            total,
            page.page_number,
            page.page_size,
            page.order.value,
        )
        return PlayerPage(items=items, total=total)

    async def count_where(self, predicate: ColumnElement[bool]) -> int:
        """Count players matching ``predicate`` without loading any rows."""

        result = await self._session.execute(count_select(predicate))
        return result.scalar_one()

    async def get_by_key(self, player_id: int) -> Player | None:
        return await self._session.get(Player, player_id)

    async def save(self, player: Player) -> Player:
        """Insert or update ``player`` and return it with its assigned id."""

        self._session.add(player)
        await self._session.flush()
        await self._session.refresh(player)
        return player

    async def delete_by_key(self, player_id: int) -> None:
        """Remove the player with ``player_id``; a missing row is a no-op."""

        player = await self.get_by_key(player_id)
        if player is None:
            return
        await self._session.delete(player)
        await self._session.flush()
