"""Domain errors raised by the player registry core.

Every failure the core reports is terminal for the current request. The HTTP
layer maps :class:`ValidationFailed` (and its subclasses) to a single
client-error response and :class:`NotFound` to a not-found response; store
failures are never wrapped and surface as the SQLAlchemy errors they are.
"""

from __future__ import annotations

__all__ = [
    "InvalidCriterionValue",
    "InvalidIdentifier",
    "NotFound",
    "PlayerRegistryError",
    "UnsupportedOperator",
    "ValidationFailed",
]


class PlayerRegistryError(Exception):
    """Base class for errors raised by the registry core."""

    def __init__(self, message: str, *, field: str | None = None, value: object = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.value = value


class ValidationFailed(PlayerRegistryError, ValueError):
    """Input was missing, out of range, or otherwise malformed."""


class InvalidCriterionValue(ValidationFailed):
    """A search value could not be coerced to its field's type."""


class UnsupportedOperator(ValidationFailed):
    """An operator was applied to a field that does not support it."""


class InvalidIdentifier(ValidationFailed):
    """A record identifier was not a positive integer."""


class NotFound(PlayerRegistryError, LookupError):
    """The targeted record does not exist."""
