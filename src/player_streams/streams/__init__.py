"""Lazy asynchronous streaming operations."""

from player_streams.streams.stream import Stream
from player_streams.streams.source import PacedStream, paced_source
from player_streams.streams.operators import (
    StreamOperator,
    MapOperator,
    FilterOperator,
    TakeOperator,
    SkipOperator,
)

__all__ = [
    "Stream",
    "PacedStream",
    "paced_source",
    "StreamOperator",
    "MapOperator",
    "FilterOperator",
    "TakeOperator",
    "SkipOperator",
]
