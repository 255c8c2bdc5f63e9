#!/usr/bin/env python3
"""
Async streams demo: full roster, country filter and name projection.
"""

import asyncio
import logging

from player_streams import PlayerStreamService
from player_streams.config import config
from player_streams.profiler import profile_drain


async def example_full_stream(service):
    """Example: Drain every player, one element per delay."""
    print("\n=== Full Stream Example ===")

    async for player in service.stream_players():
        print(f"  -> {player}")


async def example_filter(service):
    """Example: Filter by country; discarded players still cost their delay."""
    print("\n=== Filter Example ===")

    players, report = await profile_drain(service.filter_by_country("Spain"))
    for player in players:
        print(f"  -> {player}")
    print(report.summary)


async def example_map(service):
    """Example: Project each player to their name."""
    print("\n=== Map Example ===")

    async for name in service.map_to_names():
        print(f"  -> {name}")


async def main():
    logging.basicConfig(level=config.log_level)
    service = PlayerStreamService()

    await example_full_stream(service)
    await example_filter(service)
    await example_map(service)


if __name__ == "__main__":
    asyncio.run(main())
