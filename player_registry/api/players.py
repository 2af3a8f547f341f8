"""FastAPI router exposing list, count, and CRUD operations for players."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from player_registry.db.models import INTEGER_COLUMN_MAX
from player_registry.db.repositories.player import PageRequest, PlayerSearchParams
from player_registry.schemas.player import (
    DEFAULT_PAGE_NUMBER,
    DEFAULT_PAGE_SIZE,
    PlayerCreate,
    PlayerOrder,
    PlayerRead,
    PlayerUpdate,
)
from player_registry.services.dependencies import get_player_service
from player_registry.services.player_service import PlayerService

router = APIRouter()


def get_search_params(
    name: str | None = Query(None, description="Substring of the player name"),
    title: str | None = Query(None, description="Substring of the player title"),
    race: str | None = Query(None, description="Exact race, e.g. ORC"),
    profession: str | None = Query(None, description="Exact profession, e.g. WARRIOR"),
    after: str | None = Query(
        None, description="Birthday strictly after this epoch-millisecond value"
    ),
    before: str | None = Query(
        None, description="Birthday strictly before this epoch-millisecond value"
    ),
    banned: str | None = Query(None, description="'true' or 'false'"),
    min_experience: str | None = Query(None, alias="minExperience"),
    max_experience: str | None = Query(None, alias="maxExperience"),
    min_level: str | None = Query(None, alias="minLevel"),
    max_level: str | None = Query(None, alias="maxLevel"),
) -> PlayerSearchParams:
    """Collect raw search values; typing and validation happen in the service."""

    return PlayerSearchParams(
        name=name,
        title=title,
        race=race,
        profession=profession,
        after=after,
        before=before,
        banned=banned,
        min_experience=min_experience,
        max_experience=max_experience,
        min_level=min_level,
        max_level=max_level,
    )


@router.get("", response_model=list[PlayerRead])
@router.get("/", response_model=list[PlayerRead], include_in_schema=False)
async def list_players(
    search: PlayerSearchParams = Depends(get_search_params),
    order: PlayerOrder = Query(PlayerOrder.ID, description="Sort key"),
    page_number: int = Query(
        DEFAULT_PAGE_NUMBER, ge=0, le=INTEGER_COLUMN_MAX, alias="pageNumber"
    ),
    page_size: int = Query(
        DEFAULT_PAGE_SIZE, ge=1, le=INTEGER_COLUMN_MAX, alias="pageSize"
    ),
    service: PlayerService = Depends(get_player_service),
) -> list[PlayerRead]:
    """List one page of players matching the optional filters."""

    page = PageRequest(page_number=page_number, page_size=page_size, order=order)
    return await service.list_players(search, page)


@router.get("/count", response_model=int)
async def count_players(
    search: PlayerSearchParams = Depends(get_search_params),
    service: PlayerService = Depends(get_player_service),
) -> int:
    """Count players matching the optional filters."""

    return await service.count_players(search)


@router.post("", response_model=PlayerRead)
@router.post("/", response_model=PlayerRead, include_in_schema=False)
async def create_player(
    payload: PlayerCreate,
    service: PlayerService = Depends(get_player_service),
) -> PlayerRead:
    """Create a player; level fields are derived from experience."""

    return await service.create_player(payload)


@router.get("/{player_id}", response_model=PlayerRead)
async def get_player(
    player_id: int,
    service: PlayerService = Depends(get_player_service),
) -> PlayerRead:
    return await service.get_player(player_id)


@router.post("/{player_id}", response_model=PlayerRead)
@router.patch("/{player_id}", response_model=PlayerRead)
async def update_player(
    player_id: int,
    payload: PlayerUpdate,
    service: PlayerService = Depends(get_player_service),
) -> PlayerRead:
    """Apply a partial update; omitted fields keep their stored values."""

    return await service.update_player(player_id, payload.to_changes())


@router.delete("/{player_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_player(
    player_id: int,
    service: PlayerService = Depends(get_player_service),
) -> Response:
    await service.delete_player(player_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
