"""Translate search criteria into a single SQL predicate over ``players``."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from sqlalchemy import and_, true
from sqlalchemy.sql.elements import ColumnElement

from player_registry.db.repositories.player.coercion import coerce_value
from player_registry.db.repositories.player.types import (
    PLAYER_FIELDS,
    FieldSpec,
    FilterCriterion,
    FilterPredicate,
    PlayerSearchParams,
    QueryOperator,
)
from player_registry.exceptions import UnsupportedOperator

logger = logging.getLogger(__name__)


def _field_spec(field: str) -> FieldSpec:
    spec = PLAYER_FIELDS.get(field)
    if spec is None:
        raise UnsupportedOperator(f"Unknown filter field: {field!r}", field=field)
    return spec


def resolve_predicate(criterion: FilterCriterion) -> FilterPredicate:
    """Validate ``criterion`` against the field table and coerce its value."""

    spec = _field_spec(criterion.field)
    try:
        operator = QueryOperator(criterion.operator)
    except ValueError as exc:
        raise UnsupportedOperator(
            f"Unknown operator {criterion.operator!r}", field=criterion.field
        ) from exc

    if operator not in spec.operators:
        raise UnsupportedOperator(
            f"Operator {operator.value} is not supported for {criterion.field} "
            f"({spec.field_type.value})",
            field=criterion.field,
            value=criterion.value,
        )

    value = coerce_value(
        spec.field_type,
        criterion.value,
        field=criterion.field,
        enum_type=spec.enum_type,
    )
    return FilterPredicate(field=criterion.field, operator=operator, value=value)


def predicate_clause(predicate: FilterPredicate) -> ColumnElement[bool]:
    """Render one typed predicate as a SQLAlchemy boolean clause."""

    column = PLAYER_FIELDS[predicate.field].column
    value = predicate.value

    match predicate.operator:
        case QueryOperator.LIKE:
            return column.contains(value, autoescape=True)
        case QueryOperator.EQUALS:
            return column == value
        case QueryOperator.GREATER_THAN | QueryOperator.AFTER_THAN:
            return column > value
        case QueryOperator.LESS_THAN | QueryOperator.BEFORE_THAN:
            return column < value

    raise UnsupportedOperator(f"Unknown operator {predicate.operator!r}")


def build_predicate(criteria: Iterable[FilterCriterion]) -> ColumnElement[bool]:
    """Return the conjunction of every criterion in ``criteria``.

    An empty input yields a match-everything clause. Criteria are only read,
    so callers may reuse the same sequence for list and count queries.
    """

    clauses = [predicate_clause(resolve_predicate(criterion)) for criterion in criteria]
    if not clauses:
        return true()
    if len(clauses) == 1:
        return clauses[0]
    return and_(*clauses)


def criteria_from_search(params: PlayerSearchParams) -> list[FilterCriterion]:
    """Build criteria for every search parameter that is present."""

    candidates: Sequence[tuple[str | None, str, QueryOperator]] = (
        (params.name, "name", QueryOperator.LIKE),
        (params.title, "title", QueryOperator.LIKE),
        (params.race, "race", QueryOperator.EQUALS),
        (params.profession, "profession", QueryOperator.EQUALS),
        (params.after, "birthday", QueryOperator.AFTER_THAN),
        (params.before, "birthday", QueryOperator.BEFORE_THAN),
        (params.banned, "banned", QueryOperator.EQUALS),
        (params.min_experience, "experience", QueryOperator.GREATER_THAN),
        (params.max_experience, "experience", QueryOperator.LESS_THAN),
        (params.min_level, "level", QueryOperator.GREATER_THAN),
        (params.max_level, "level", QueryOperator.LESS_THAN),
    )
    criteria = [
        FilterCriterion(field=field, operator=operator, value=value)
        for value, field, operator in candidates
        if value is not None
    ]
    logger.debug("Built %d search criteria", len(criteria))
    return criteria
