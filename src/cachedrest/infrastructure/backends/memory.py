"""In-memory cache backend implementation."""

import fnmatch
import threading
import time
from collections.abc import Callable
from datetime import timedelta
from typing import NamedTuple

from cachetools import TLRUCache  # type: ignore[import-untyped]


class _Item(NamedTuple):
    value: bytes
    ttl: float


def _time_to_use(_key: str, item: _Item, now: float) -> float:
    return now + item.ttl


class InMemoryCacheBackend:
    """In-memory cache backend using LRU with per-item TTL.

    Suitable for single-process deployments. Uses cachetools'
    ``TLRUCache`` so every entry expires on its own TTL; expired entries
    are dropped lazily when they are looked up or when room is needed.
    Access is serialized with a lock so the backend can be shared by
    threads.
    """

    def __init__(
        self,
        maxsize: int = 1000,
        default_ttl: float = 300.0,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the in-memory cache backend.

        Args:
            maxsize: Maximum number of items in the cache.
            default_ttl: Default TTL in seconds for items.
            timer: Clock returning seconds; injectable for tests.
        """
        self._maxsize = maxsize
        self._default_ttl = default_ttl
        self._cache: TLRUCache[str, _Item] = TLRUCache(
            maxsize=maxsize,
            ttu=_time_to_use,
            timer=timer,
        )
        self._lock = threading.RLock()

    async def get(self, key: str) -> bytes | None:
        """Retrieve cached value by key.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cached value as bytes, or None if not found or expired.
        """
        with self._lock:
            item = self._cache.get(key)
        return item.value if item is not None else None

    async def set(
        self,
        key: str,
        value: bytes,
        ttl: timedelta | None = None,
    ) -> None:
        """Store value with optional TTL.

        A non-positive TTL stores nothing and drops any previous value.

        Args:
            key: The cache key.
            value: The value to store as bytes.
            ttl: Optional time-to-live. If None, uses default.
        """
        seconds = ttl.total_seconds() if ttl is not None else self._default_ttl
        with self._lock:
            if seconds <= 0:
                self._cache.pop(key, None)
                return
            self._cache[key] = _Item(value=value, ttl=seconds)

    async def delete(self, key: str) -> bool:
        """Delete cached value.

        Args:
            key: The cache key to delete.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        with self._lock:
            try:
                del self._cache[key]
                return True
            except KeyError:
                return False

    async def clear(self) -> None:
        """Clear all cached values."""
        with self._lock:
            self._cache.clear()

    async def delete_pattern(self, pattern: str) -> int:
        """Delete keys matching pattern.

        Args:
            pattern: Glob-style pattern to match keys.

        Returns:
            Number of keys deleted.
        """
        with self._lock:
            self._cache.expire()
            keys_to_delete = [
                key for key in list(self._cache.keys())
                if fnmatch.fnmatchcase(key, pattern)
            ]

            count = 0
            for key in keys_to_delete:
                try:
                    del self._cache[key]
                    count += 1
                except KeyError:
                    pass

        return count

    def __len__(self) -> int:
        """Return the number of items in the cache."""
        with self._lock:
            self._cache.expire()
            return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Return the maximum size of the cache."""
        return self._maxsize
