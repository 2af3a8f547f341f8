"""Shared type definitions for the player filter engine."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any

from sqlalchemy.orm import InstrumentedAttribute

from player_registry.db.models import Player, Profession, Race


class QueryOperator(str, Enum):
    """Comparison operators a search criterion may use."""

    LIKE = "LIKE"
    EQUALS = "EQUALS"
    GREATER_THAN = "GREATER_THAN"
    LESS_THAN = "LESS_THAN"
    AFTER_THAN = "AFTER_THAN"
    BEFORE_THAN = "BEFORE_THAN"


class FieldType(str, Enum):
    """Declared semantic type of a filterable attribute."""

    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    TIMESTAMP = "timestamp"
    ENUM = "enum"


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Static description of one filterable player attribute."""

    column: InstrumentedAttribute[Any]
    field_type: FieldType
    operators: frozenset[QueryOperator]
    enum_type: type[Enum] | None = None


_STRING_OPS = frozenset({QueryOperator.LIKE, QueryOperator.EQUALS})
_NUMERIC_OPS = frozenset(
    {QueryOperator.EQUALS, QueryOperator.GREATER_THAN, QueryOperator.LESS_THAN}
)
_TIMESTAMP_OPS = frozenset(
    {QueryOperator.EQUALS, QueryOperator.AFTER_THAN, QueryOperator.BEFORE_THAN}
)
_EQUALITY_OPS = frozenset({QueryOperator.EQUALS})

PLAYER_FIELDS: MappingProxyType[str, FieldSpec] = MappingProxyType(
    {
        "id": FieldSpec(Player.id, FieldType.INTEGER, _NUMERIC_OPS),
        "name": FieldSpec(Player.name, FieldType.STRING, _STRING_OPS),
        "title": FieldSpec(Player.title, FieldType.STRING, _STRING_OPS),
        "race": FieldSpec(Player.race, FieldType.ENUM, _EQUALITY_OPS, Race),
        "profession": FieldSpec(
            Player.profession, FieldType.ENUM, _EQUALITY_OPS, Profession
        ),
        "birthday": FieldSpec(Player.birthday, FieldType.TIMESTAMP, _TIMESTAMP_OPS),
        "banned": FieldSpec(Player.banned, FieldType.BOOLEAN, _EQUALITY_OPS),
        "experience": FieldSpec(Player.experience, FieldType.INTEGER, _NUMERIC_OPS),
        "level": FieldSpec(Player.level, FieldType.INTEGER, _NUMERIC_OPS),
        "until_next_level": FieldSpec(
            Player.until_next_level, FieldType.INTEGER, _NUMERIC_OPS
        ),
    }
)
"""Filterable attributes keyed by name; the single source of dispatch."""


@dataclass(frozen=True, slots=True)
class FilterCriterion:
    """One user-supplied filter instruction before coercion."""

    field: str
    operator: QueryOperator
    value: str


CoercedValue = str | int | bool | datetime | Enum


@dataclass(frozen=True, slots=True)
class FilterPredicate:
    """A criterion whose value has been coerced to the field's type."""

    field: str
    operator: QueryOperator
    value: CoercedValue


@dataclass(frozen=True, slots=True)
class PlayerSearchParams:
    """Raw, optional search parameters as received from the HTTP layer."""

    name: str | None = None
    title: str | None = None
    race: str | None = None
    profession: str | None = None
    after: str | None = None
    before: str | None = None
    banned: str | None = None
    min_experience: str | None = None
    max_experience: str | None = None
    min_level: str | None = None
    max_level: str | None = None
