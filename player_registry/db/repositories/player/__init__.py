"""Player store plus the filter engine that feeds it predicates."""

from __future__ import annotations

from player_registry.db.repositories.player.filters import (
    build_predicate,
    criteria_from_search,
    predicate_clause,
    resolve_predicate,
)
from player_registry.db.repositories.player.paging import PageRequest, PlayerPage
from player_registry.db.repositories.player.repository import PlayerRepository
from player_registry.db.repositories.player.types import (
    PLAYER_FIELDS,
    FieldSpec,
    FieldType,
    FilterCriterion,
    FilterPredicate,
    PlayerSearchParams,
    QueryOperator,
)

__all__ = [
    "PLAYER_FIELDS",
    "FieldSpec",
    "FieldType",
    "FilterCriterion",
    "FilterPredicate",
    "PageRequest",
    "PlayerPage",
    "PlayerRepository",
    "PlayerSearchParams",
    "QueryOperator",
    "build_predicate",
    "criteria_from_search",
    "predicate_clause",
    "resolve_predicate",
]
