"""
Player Streams: lazy, paced asynchronous streams over a ranked roster.

Sources emit one element at a time after a simulated I/O delay; filter and
map stages pull from their upstream on demand and never reorder.
"""

from player_streams.config import StreamConfig
from player_streams.models import (
    Player,
    Product,
    ProductDTO,
    OrderItemRequest,
    OrderCreateRequest,
)
from player_streams.data import DEFAULT_ROSTER, default_roster
from player_streams.streams import Stream, PacedStream
from player_streams.services import PlayerStreamService
from player_streams.profiler import DrainReport, profile_drain

__version__ = "0.1.0"
__license__ = "Apache-2.0"

__all__ = [
    "StreamConfig",
    "Player",
    "Product",
    "ProductDTO",
    "OrderItemRequest",
    "OrderCreateRequest",
    "DEFAULT_ROSTER",
    "default_roster",
    "Stream",
    "PacedStream",
    "PlayerStreamService",
    "DrainReport",
    "profile_drain",
]
