"""
Drain profiler: measure wall time and process memory while draining a stream.

Useful for observing pacing cost, e.g. that a filter matching one element
still pays the delay of every upstream element it had to discard.
"""

import time
import logging
import psutil
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Tuple

from player_streams.streams import Stream

logger = logging.getLogger(__name__)


@dataclass
class DrainReport:
    """Result of draining one stream."""
    items: int
    elapsed: float
    rss_before: int
    rss_after: int
    summary: str

    @property
    def rss_delta(self) -> int:
        return self.rss_after - self.rss_before

    def to_dict(self) -> Dict[str, Any]:
        """Convert report to dictionary."""
        return asdict(self)


def format_bytes(bytes: int) -> str:
    """Format bytes as human-readable string."""
    sign = "-" if bytes < 0 else ""
    value = float(abs(bytes))
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if value < 1024.0:
            return f"{sign}{value:.2f} {unit}"
        value /= 1024.0
    return f"{sign}{value:.2f} PB"


async def profile_drain(stream: Stream[Any]) -> Tuple[List[Any], DrainReport]:
    """
    Drain ``stream`` completely.

    Returns:
        The collected elements and a ``DrainReport``.
    """
    process = psutil.Process()
    rss_before = process.memory_info().rss
    start = time.perf_counter()

    items = await stream.collect()

    elapsed = time.perf_counter() - start
    rss_after = process.memory_info().rss

    summary = (f"Drained {len(items)} items in {elapsed:.3f}s "
               f"(RSS change {format_bytes(rss_after - rss_before)})")
    logger.debug(summary)

    report = DrainReport(
        items=len(items),
        elapsed=elapsed,
        rss_before=rss_before,
        rss_after=rss_after,
        summary=summary,
    )
    return items, report
