"""Conversions between epoch milliseconds and the naive UTC datetimes we store."""

from __future__ import annotations

from datetime import datetime, timedelta

__all__ = ["EPOCH", "from_epoch_millis", "to_epoch_millis"]

EPOCH = datetime(1970, 1, 1)


def from_epoch_millis(value: int) -> datetime:
    """Return the naive UTC datetime ``value`` milliseconds after the epoch."""

    return EPOCH + timedelta(milliseconds=value)


def to_epoch_millis(value: datetime) -> int:
    """Return ``value`` (naive UTC) as whole milliseconds since the epoch."""

    return (value - EPOCH) // timedelta(milliseconds=1)
