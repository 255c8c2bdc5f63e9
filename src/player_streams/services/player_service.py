"""
Caller-facing streaming operations over the player roster.
"""

import logging
from typing import Callable, Iterable, Optional

from player_streams.data import default_roster
from player_streams.models import Player
from player_streams.streams import PacedStream, Stream

logger = logging.getLogger(__name__)


class PlayerStreamService:
    """
    Expose the roster as paced async streams.

    Every call builds an independent pipeline; no state is shared between
    drains or between concurrent consumers.
    """

    def __init__(self,
                 provider: Callable[[], Iterable[Player]] = default_roster,
                 delay: Optional[float] = None):
        """
        Initialize service.

        Args:
            provider: Callable returning the players in emission order
            delay: Seconds per element (None for the configured default)
        """
        self.provider = provider
        self.delay = delay

    def stream_players(self) -> Stream[Player]:
        """Stream every player in roster order."""
        logger.debug("Streaming all players")
        return PacedStream(self.provider, self.delay)

    def filter_by_country(self, country: Optional[str]) -> Stream[Player]:
        """
        Stream players whose country equals ``country`` exactly.

        Matching is case-sensitive with no trimming. A ``None`` country
        matches nothing, though the roster is still drained.
        """
        logger.debug("Filtering players by country %r", country)
        if country is None:
            return self.stream_players().filter(lambda player: False)
        return self.stream_players().filter(lambda player: player.country == country)

    def map_to_names(self) -> Stream[str]:
        """Stream player names in roster order."""
        logger.debug("Mapping players to names")
        return self.stream_players().map(lambda player: player.name)

    async def find_by_id(self, player_id: int) -> Optional[Player]:
        """Return the first player with ``player_id``, or None."""
        return await self.stream_players().filter(lambda player: player.id == player_id).first()

    def top_n(self, n: int) -> Stream[Player]:
        """Stream the n best-ranked players. The roster is already in rank order."""
        return self.stream_players().take(n)
