"""Business logic behind the player endpoints.

The service owns every semantic rule: which search parameters become
criteria, the field bounds applied on create and update, and keeping
``level``/``until_next_level`` in step with ``experience``. Persistence is
delegated to a repository offering query-by-predicate and CRUD-by-key.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any, Protocol, runtime_checkable

from sqlalchemy.sql.elements import ColumnElement

from player_registry.db.models import INTEGER_COLUMN_MAX, Player
from player_registry.db.repositories.player import (
    PageRequest,
    PlayerPage,
    PlayerSearchParams,
    build_predicate,
    criteria_from_search,
)
from player_registry.exceptions import InvalidIdentifier, NotFound, ValidationFailed
from player_registry.schemas.player import (
    PlayerChanges,
    PlayerCreate,
    PlayerRead,
)
from player_registry.services.levels import (
    MAX_EXPERIENCE,
    MIN_EXPERIENCE,
    level_progress,
)
from player_registry.utils.timestamps import from_epoch_millis, to_epoch_millis

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = 12
TITLE_MAX_LENGTH = 30
BIRTHDAY_MIN_MILLIS = to_epoch_millis(datetime(2000, 1, 1))
BIRTHDAY_MAX_MILLIS = to_epoch_millis(datetime(3001, 1, 1)) - 1

REQUIRED_CREATE_FIELDS = ("name", "title", "race", "profession", "birthday", "experience")


@runtime_checkable
class PlayerRepositoryProtocol(Protocol):
    """Store surface required by :class:`PlayerService`."""

    async def query(
        self, predicate: ColumnElement[bool], page: PageRequest
    ) -> PlayerPage:
        """Return one ordered page of matches and the total match count."""

    async def count_where(self, predicate: ColumnElement[bool]) -> int:
        """Count matches without materialising rows."""

    async def get_by_key(self, player_id: int) -> Player | None:
        """Return the player with ``player_id`` or ``None``."""

    async def save(self, player: Player) -> Player:
        """Persist ``player`` and return it with its identifier assigned."""

    async def delete_by_key(self, player_id: int) -> None:
        """Remove the player with ``player_id``."""


def _check_name(value: str) -> None:
    if not value or len(value) > NAME_MAX_LENGTH:
        raise ValidationFailed(
            f"name must be between 1 and {NAME_MAX_LENGTH} characters",
            field="name",
            value=value,
        )


def _check_title(value: str) -> None:
    if len(value) > TITLE_MAX_LENGTH:
        raise ValidationFailed(
            f"title must be at most {TITLE_MAX_LENGTH} characters",
            field="title",
            value=value,
        )


def _check_birthday(value: int) -> None:
    if not BIRTHDAY_MIN_MILLIS <= value <= BIRTHDAY_MAX_MILLIS:
        raise ValidationFailed(
            "birthday must fall between the years 2000 and 3000",
            field="birthday",
            value=value,
        )


def _check_experience(value: int) -> None:
    if not MIN_EXPERIENCE <= value <= MAX_EXPERIENCE:
        raise ValidationFailed(
            f"experience must be between {MIN_EXPERIENCE} and {MAX_EXPERIENCE}",
            field="experience",
            value=value,
        )


_FIELD_CHECKS: Mapping[str, Callable[[Any], None]] = {
    "name": _check_name,
    "title": _check_title,
    "birthday": _check_birthday,
    "experience": _check_experience,
}


def validate_fields(values: Mapping[str, Any]) -> None:
    """Apply the per-field bounds to every field present in ``values``."""

    for field, value in values.items():
        check = _FIELD_CHECKS.get(field)
        if check is not None:
            check(value)


def require_positive_id(player_id: int) -> int:
    if player_id <= 0:
        raise InvalidIdentifier(
            "Player id must be a positive integer", field="id", value=player_id
        )
    return player_id


def _apply_fields(player: Player, values: Mapping[str, Any]) -> None:
    """Copy ``values`` onto ``player`` and refresh derived level fields."""

    for field, value in values.items():
        if field == "birthday":
            value = from_epoch_millis(value)
        setattr(player, field, value)

    if "experience" in values:
        player.level, player.until_next_level = level_progress(values["experience"])


class PlayerService:
    """Coordinates validation, level derivation, and persistence."""

    def __init__(self, repository: PlayerRepositoryProtocol) -> None:
        self._repository = repository

    async def search_players(
        self, search: PlayerSearchParams, page: PageRequest
    ) -> PlayerPage:
        """Return one page of players matching ``search`` plus the total count."""

        predicate = build_predicate(criteria_from_search(search))
        return await self._repository.query(predicate, page)

    async def list_players(
        self, search: PlayerSearchParams, page: PageRequest
    ) -> list[PlayerRead]:
        """Return the contents of one page of matching players."""

        result = await self.search_players(search, page)
        return [PlayerRead.model_validate(player) for player in result.items]

    async def count_players(self, search: PlayerSearchParams) -> int:
        """Count players matching ``search`` using the same predicate as listing."""

        predicate = build_predicate(criteria_from_search(search))
        return await self._repository.count_where(predicate)

    async def create_player(self, payload: PlayerCreate) -> PlayerRead:
        """Validate ``payload``, derive level fields, and persist a new player."""

        values = payload.model_dump(exclude_none=True)
        missing = [field for field in REQUIRED_CREATE_FIELDS if field not in values]
        if missing:
            raise ValidationFailed(
                f"Missing required field(s): {', '.join(missing)}",
                field=missing[0],
            )
        validate_fields(values)
        values.setdefault("banned", False)

        player = Player()
        _apply_fields(player, values)
        saved = await self._repository.save(player)
        logger.info(
            "Created player %s (level %s, %s to next level)",
            saved.id,
            saved.level,
            saved.until_next_level,
        )
        return PlayerRead.model_validate(saved)

    async def get_player(self, player_id: int) -> PlayerRead:
        player = await self._require_player(player_id)
        return PlayerRead.model_validate(player)

    async def update_player(
        self, player_id: int, changes: PlayerChanges
    ) -> PlayerRead:
        """Merge the supplied fields into an existing player.

        Fields absent from ``changes`` keep their stored values. Level fields
        are recomputed only when ``experience`` is supplied.
        """

        player = await self._require_player(player_id)
        values = changes.supplied()
        validate_fields(values)
        _apply_fields(player, values)
        saved = await self._repository.save(player)
        logger.info("Updated player %s fields=%s", saved.id, sorted(values))
        return PlayerRead.model_validate(saved)

    async def delete_player(self, player_id: int) -> None:
        await self._require_player(player_id)
        await self._repository.delete_by_key(player_id)
        logger.info("Deleted player %s", player_id)

    async def _require_player(self, player_id: int) -> Player:
        require_positive_id(player_id)
        # Ids past the column range cannot exist, so skip the store lookup.
        player = (
            await self._repository.get_by_key(player_id)
            if player_id <= INTEGER_COLUMN_MAX
            else None
        )
        if player is None:
            raise NotFound(f"Player {player_id} not found", field="id", value=player_id)
        return player
