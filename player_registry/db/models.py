"""SQLAlchemy ORM models for the player registry."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from sqlalchemy import Boolean, DateTime, Integer, String
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


# Range of the signed 32-bit ``Integer`` columns below.
INTEGER_COLUMN_MIN = -(2**31)
INTEGER_COLUMN_MAX = 2**31 - 1


class Base(DeclarativeBase):
    pass


class Race(str, Enum):
    """Playable races."""

    HUMAN = "HUMAN"
    DWARF = "DWARF"
    ELF = "ELF"
    GIANT = "GIANT"
    ORC = "ORC"
    TROLL = "TROLL"
    HOBBIT = "HOBBIT"


class Profession(str, Enum):
    """Playable professions."""

    WARRIOR = "WARRIOR"
    ROGUE = "ROGUE"
    SORCERER = "SORCERER"
    CLERIC = "CLERIC"
    PALADIN = "PALADIN"
    NAZGUL = "NAZGUL"
    WARLOCK = "WARLOCK"
    DRUID = "DRUID"


class Player(Base):
    __tablename__ = "players"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(12), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(30), nullable=False)
    race: Mapped[Race] = mapped_column(
        SAEnum(Race, name="player_race", native_enum=False, length=16),
        nullable=False,
        index=True,
    )
    profession: Mapped[Profession] = mapped_column(
        SAEnum(Profession, name="player_profession", native_enum=False, length=16),
        nullable=False,
        index=True,
    )
    # Naive UTC; API payloads carry epoch milliseconds.
    birthday: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    banned: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    experience: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    level: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    until_next_level: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"Player(id={self.id!r}, name={self.name!r}, level={self.level!r})"
