"""Repository interfaces for data access abstraction."""

from .player_repository import PlayerRepository

__all__ = [
    "PlayerRepository",
]
