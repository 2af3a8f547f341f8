"""Pydantic schemas that power the player API surface."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    field_validator,
)
from pydantic.alias_generators import to_camel

from player_registry.db.models import Profession, Race
from player_registry.utils.timestamps import to_epoch_millis

T = TypeVar("T")

DEFAULT_PAGE_NUMBER = 0
DEFAULT_PAGE_SIZE = 3


class PlayerOrder(str, Enum):
    """Sortable fields exposed through the ``order`` query parameter."""

    ID = "ID"
    NAME = "NAME"
    EXPERIENCE = "EXPERIENCE"
    BIRTHDAY = "BIRTHDAY"
    LEVEL = "LEVEL"

    @property
    def field_name(self) -> str:
        """Return the model attribute this ordering key sorts by."""

        return self.value.lower()


class PlayerRead(BaseModel):
    """Read model exposed in API responses."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int
    name: str
    title: str
    race: Race
    profession: Profession
    birthday: int = Field(..., description="Birthday as epoch milliseconds (UTC)")
    banned: bool
    experience: int
    level: int
    until_next_level: int = Field(
        ..., description="Experience still required to reach the next level"
    )

    @field_validator("birthday", mode="before")
    @classmethod
    def _birthday_to_millis(cls, value: Any) -> Any:
        if isinstance(value, datetime):
            return to_epoch_millis(value)
        return value


class _PlayerPayload(BaseModel):
    """Shape-only binding shared by create and update bodies.

    Bounds are enforced by :mod:`player_registry.services.player_service` so
    both endpoints report them through the same error type. Unknown keys
    (including ``level``/``untilNextLevel``) are dropped.
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    title: str | None = None
    race: Race | None = None
    profession: Profession | None = None
    birthday: StrictInt | None = Field(None, description="Epoch milliseconds (UTC)")
    banned: StrictBool | None = None
    experience: StrictInt | None = None


class PlayerCreate(_PlayerPayload):
    """Payload for creating a player; every field except ``banned`` is required."""


@dataclass(frozen=True, slots=True)
class Present(Generic[T]):
    """Marks a field that was supplied in a partial update."""

    value: T


@dataclass(frozen=True, slots=True)
class PlayerChanges:
    """Partial update where ``None`` means "not supplied"."""

    name: Present[str] | None = None
    title: Present[str] | None = None
    race: Present[Race] | None = None
    profession: Present[Profession] | None = None
    birthday: Present[int] | None = None
    banned: Present[bool] | None = None
    experience: Present[int] | None = None

    def supplied(self) -> dict[str, Any]:
        """Return the supplied fields unwrapped, keyed by attribute name."""

        return {
            name: wrapper.value
            for name, wrapper in (
                ("name", self.name),
                ("title", self.title),
                ("race", self.race),
                ("profession", self.profession),
                ("birthday", self.birthday),
                ("banned", self.banned),
                ("experience", self.experience),
            )
            if wrapper is not None
        }


class PlayerUpdate(_PlayerPayload):
    """Partial update payload; omitted or ``null`` fields keep their values."""

    def to_changes(self) -> PlayerChanges:
        """Wrap every explicitly supplied, non-null field in :class:`Present`."""

        supplied = {
            name: Present(getattr(self, name))
            for name in self.model_fields_set
            if getattr(self, name) is not None
        }
        return PlayerChanges(**supplied)
