"""
Configuration management for paced streams.
"""

import os
from typing import Optional
from dataclasses import dataclass, field


DEFAULT_ITEM_DELAY = 0.2  # seconds, simulated I/O latency per element


def _delay_from_env() -> float:
    raw = os.environ.get("PLAYER_STREAMS_ITEM_DELAY")
    if raw is None or raw.strip() == "":
        return DEFAULT_ITEM_DELAY
    return float(raw)


@dataclass
class StreamConfig:
    """Global configuration for paced stream operations."""

    # Pacing
    item_delay: float = field(default_factory=_delay_from_env)

    # Logging
    log_level: str = "WARNING"

    _instance: Optional['StreamConfig'] = None

    def __post_init__(self):
        """Validate pacing settings."""
        self._check_delay(self.item_delay)

    @staticmethod
    def _check_delay(delay: float) -> None:
        if delay < 0:
            raise ValueError(f"item_delay must be non-negative, got {delay}")

    @classmethod
    def get_instance(cls) -> 'StreamConfig':
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def set_defaults(cls, **kwargs) -> None:
        """Set default configuration values."""
        instance = cls.get_instance()
        if 'item_delay' in kwargs:
            cls._check_delay(kwargs['item_delay'])
        for key, value in kwargs.items():
            if hasattr(instance, key):
                setattr(instance, key, value)

    def resolve_delay(self, delay: Optional[float] = None) -> float:
        """Return an explicit delay if given, otherwise the configured one."""
        if delay is None:
            return self.item_delay
        self._check_delay(delay)
        return delay


# Global configuration instance
config = StreamConfig.get_instance()
