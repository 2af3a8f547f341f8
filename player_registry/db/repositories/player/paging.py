"""Ordering and pagination applied on top of a filter predicate."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import Select, func, select
from sqlalchemy.sql.elements import ColumnElement

from player_registry.db.models import Player
from player_registry.schemas.player import PlayerOrder


@dataclass(frozen=True, slots=True)
class PageRequest:
    """Zero-based page coordinates plus ordering key.

    Values are validated by the HTTP layer before they get here.
    """

    page_number: int = 0
    page_size: int = 3
    order: PlayerOrder = PlayerOrder.ID

    @property
    def offset(self) -> int:
        return self.page_number * self.page_size


@dataclass(slots=True)
class PlayerPage:
    """Bounded, ordered slice of the matching players plus their total count."""

    items: list[Player] = field(default_factory=list)
    total: int = 0


def _order_column(order: PlayerOrder) -> Any:
    return getattr(Player, order.field_name)


def paged_select(
    predicate: ColumnElement[bool], page: PageRequest
) -> Select[tuple[Player]]:
    """Return a ``SELECT`` for one page, ties broken by ascending id."""

    order_column = _order_column(page.order)
    ordering = [order_column.asc()]
    if page.order is not PlayerOrder.ID:
        ordering.append(Player.id.asc())

    return (
        select(Player)
        .where(predicate)
        .order_by(*ordering)
        .offset(page.offset)
        .limit(page.page_size)
    )


def count_select(predicate: ColumnElement[bool]) -> Select[tuple[int]]:
    """Return a ``SELECT COUNT(*)`` evaluating the same predicate."""

    return select(func.count()).select_from(Player).where(predicate)
