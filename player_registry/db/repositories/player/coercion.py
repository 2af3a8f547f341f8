"""Coerce raw search strings into values matching a field's declared type."""

from __future__ import annotations

import re
from enum import Enum

from player_registry.db.models import INTEGER_COLUMN_MAX, INTEGER_COLUMN_MIN
from player_registry.db.repositories.player.types import CoercedValue, FieldType
from player_registry.exceptions import InvalidCriterionValue
from player_registry.utils.timestamps import from_epoch_millis

_BOOLEAN_LITERALS = {"true": True, "false": False}
_INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")


def _parse_int(raw: str, *, field: str) -> int:
    text = raw.strip()
    if not _INTEGER_LITERAL.fullmatch(text):
        raise InvalidCriterionValue(
            f"{field} expects an integer, got {raw!r}", field=field, value=raw
        )
    return int(text, 10)


def coerce_value(
    field_type: FieldType,
    raw: str,
    *,
    field: str,
    enum_type: type[Enum] | None = None,
) -> CoercedValue:
    """Return ``raw`` converted to the Python type behind ``field_type``.

    Raises:
        InvalidCriterionValue: ``raw`` is not a valid literal for the type.
    """

    if field_type is FieldType.STRING:
        return raw

    if field_type is FieldType.INTEGER:
        value = _parse_int(raw, field=field)
        if not INTEGER_COLUMN_MIN <= value <= INTEGER_COLUMN_MAX:
            raise InvalidCriterionValue(
                f"{field} value {raw!r} is out of range", field=field, value=raw
            )
        return value

    if field_type is FieldType.BOOLEAN:
        parsed = _BOOLEAN_LITERALS.get(raw.strip().lower())
        if parsed is None:
            raise InvalidCriterionValue(
                f"{field} expects 'true' or 'false', got {raw!r}",
                field=field,
                value=raw,
            )
        return parsed

    if field_type is FieldType.TIMESTAMP:
        millis = _parse_int(raw, field=field)
        try:
            return from_epoch_millis(millis)
        except OverflowError as exc:
            raise InvalidCriterionValue(
                f"{field} timestamp {raw!r} is out of range", field=field, value=raw
            ) from exc

    if field_type is FieldType.ENUM:
        if enum_type is None:
            raise TypeError(f"Enum field {field!r} is missing its enum type")
        try:
            return enum_type[raw]
        except KeyError as exc:
            allowed = ", ".join(member.name for member in enum_type)
            raise InvalidCriterionValue(
                f"{field} must be one of {allowed}, got {raw!r}",
                field=field,
                value=raw,
            ) from exc

    raise TypeError(f"Unhandled field type: {field_type!r}")
