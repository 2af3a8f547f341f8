"""Repository package for the database access layer."""

from player_registry.db.repositories.player import PlayerRepository

__all__ = ["PlayerRepository"]
