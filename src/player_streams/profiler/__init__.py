"""Drain profiling for paced streams."""

from player_streams.profiler.profiler import (
    DrainReport,
    format_bytes,
    profile_drain,
)

__all__ = [
    "DrainReport",
    "format_bytes",
    "profile_drain",
]
