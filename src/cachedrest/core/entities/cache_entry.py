"""Cache entry entity."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
import time
from typing import Any


@dataclass(frozen=True)
class CacheEntry:
    """Immutable cache entry value object.

    ``created_at`` is a reading of the cache timer (monotonic seconds by
    default), not a wall-clock datetime, so it can be compared directly
    against the same timer at lookup time.
    """

    key: str
    value: Any
    created_at: float
    ttl: timedelta

    @property
    def expires_at(self) -> float:
        """Calculate expiration time.

        Returns:
            The timer reading at which this entry stops being served.
        """
        return self.created_at + self.ttl.total_seconds()

    def is_expired(self, now: float) -> bool:
        """Check if entry has expired at ``now``.

        An entry is served only while ``now < expires_at``.

        Args:
            now: Current timer reading.

        Returns:
            True if the entry has expired, False otherwise.
        """
        return now >= self.expires_at

    @classmethod
    def create(
        cls,
        key: str,
        value: Any,
        ttl: timedelta,
        timer: Callable[[], float] = time.monotonic,
    ) -> "CacheEntry":
        """Factory method to create a new cache entry.

        Args:
            key: The cache key.
            value: The value to cache.
            ttl: Time-to-live.
            timer: Clock used to stamp the entry.

        Returns:
            A new CacheEntry instance.
        """
        return cls(key=key, value=value, created_at=timer(), ttl=ttl)
