"""Pydantic schemas for API payloads and responses."""

from player_registry.schemas.error import (  # noqa: F401
    ErrorResponse,
    ErrorType,
    ValidationErrorDetail,
    ValidationErrorResponse,
)
from player_registry.schemas.player import (  # noqa: F401
    PlayerChanges,
    PlayerCreate,
    PlayerOrder,
    PlayerRead,
    PlayerUpdate,
    Present,
)
