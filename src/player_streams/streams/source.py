"""
Paced sources that emulate I/O latency per element.
"""

import asyncio
import logging
from typing import AsyncIterator, Callable, Iterable, Optional, TypeVar

from player_streams.config import config
from player_streams.data import default_roster
from player_streams.streams.stream import Stream

T = TypeVar('T')

logger = logging.getLogger(__name__)


async def paced_source(provider: Callable[[], Iterable[T]],
                       delay: float) -> AsyncIterator[T]:
    """
    Yield the provider's elements one by one, sleeping ``delay`` seconds
    before each.

    The provider is called on the first pull, not before. Delays are never
    overlapped, so a full drain takes roughly ``len(elements) * delay``.
    Closing the generator early cancels the pending sleep.
    """
    logger.debug("Paced source started (delay=%.3fs)", delay)
    emitted = 0
    exhausted = False
    try:
        for item in provider():
            await asyncio.sleep(delay)
            emitted += 1
            yield item
        exhausted = True
        logger.debug("Paced source exhausted after %d items", emitted)
    finally:
        if not exhausted:
            logger.debug("Paced source closed early after %d items", emitted)


class PacedStream(Stream[T]):
    """Stream the roster (or any provider) with a fixed delay per element."""

    def __init__(self,
                 provider: Callable[[], Iterable[T]] = default_roster,
                 delay: Optional[float] = None):
        self.provider = provider
        self.delay = config.resolve_delay(delay)

        def paced_iterator():
            return paced_source(self.provider, self.delay)

        super().__init__(paced_iterator)
