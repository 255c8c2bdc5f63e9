"""Streaming services."""

from player_streams.services.player_service import PlayerStreamService

__all__ = [
    "PlayerStreamService",
]
