"""Response cache - read-through, time-expiring memoization of GET responses."""

import logging
import time
from collections.abc import Awaitable, Callable
from datetime import timedelta
from typing import Any

from cachedrest.core.entities.cache_config import CacheConfig
from cachedrest.core.entities.cache_entry import CacheEntry
from cachedrest.core.entities.request_signature import RequestSignature
from cachedrest.core.interfaces.cache_backend import ICacheBackend
from cachedrest.core.interfaces.key_builder import IKeyBuilder
from cachedrest.core.interfaces.serializer import ISerializer

logger = logging.getLogger(__name__)

CACHEABLE_METHOD = "GET"

_MISS = object()


class ResponseCache:
    """Domain service that memoizes read responses by request identity.

    Composes a backend, a key builder and a serializer. Only GET
    signatures are ever looked up or stored; any other method is a
    permanent miss. Turning the cache off changes latency only, never
    the value a caller ends up with.
    """

    def __init__(
        self,
        backend: ICacheBackend,
        key_builder: IKeyBuilder,
        serializer: ISerializer,
        config: CacheConfig | None = None,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the response cache.

        Args:
            backend: The cache backend to use for storage.
            key_builder: The key builder for generating cache keys.
            serializer: The serializer for encoding/decoding values.
            config: Optional cache configuration. Uses defaults if not provided.
            timer: Clock used to stamp entries; should match the backend's.
        """
        self._backend = backend
        self._key_builder = key_builder
        self._serializer = serializer
        self._config = config or CacheConfig()
        self._timer = timer

        # Statistics
        self._hits = 0
        self._misses = 0

    @property
    def config(self) -> CacheConfig:
        """Get the cache configuration."""
        return self._config

    @property
    def stats(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dictionary with hits, misses, and total lookups.
        """
        return {
            "hits": self._hits,
            "misses": self._misses,
            "total": self._hits + self._misses,
        }

    def is_cacheable(self, signature: RequestSignature) -> bool:
        return self._config.enabled and signature.method == CACHEABLE_METHOD

    async def lookup(self, signature: RequestSignature) -> Any | None:
        """Return the cached value for ``signature`` if it is still fresh.

        Args:
            signature: The request identity.

        Returns:
            The cached value, or None on a miss. A cached JSON ``null`` also
            reads as None; use ``get_or_compute`` to tell the two apart.
        """
        cached = await self._lookup(signature)
        return None if cached is _MISS else cached

    async def _lookup(self, signature: RequestSignature) -> Any:
        if not self.is_cacheable(signature):
            return _MISS

        key = self._key_builder.build(signature)
        cached_data = await self._backend.get(key)

        if cached_data is None:
            self._misses += 1
            logger.debug("cache miss for %s", key)
            return _MISS

        self._hits += 1
        logger.debug("cache hit for %s", key)
        return self._serializer.deserialize(cached_data)

    async def store(
        self,
        signature: RequestSignature,
        value: Any,
        ttl: timedelta | None = None,
    ) -> CacheEntry | None:
        """Insert or replace the entry for ``signature``.

        Args:
            signature: The request identity.
            value: The response to cache.
            ttl: Optional TTL. Uses config default if not provided.

        Returns:
            The created CacheEntry, or None when the signature is not
            cacheable and nothing was stored.
        """
        if not self.is_cacheable(signature):
            return None

        effective_ttl = ttl if ttl is not None else self._config.default_ttl

        key = self._key_builder.build(signature)
        entry = CacheEntry.create(
            key=key, value=value, ttl=effective_ttl, timer=self._timer
        )

        serialized = self._serializer.serialize(value)
        await self._backend.set(key, serialized, effective_ttl)
        return entry

    async def get_or_compute(
        self,
        signature: RequestSignature,
        compute: Callable[[], Awaitable[Any]],
        ttl: timedelta | None = None,
    ) -> Any:
        """Read-through access: serve from cache, else compute and store.

        Args:
            signature: The request identity.
            compute: Coroutine factory producing the fresh value.
            ttl: Optional TTL for a freshly computed value.

        Returns:
            The cached or freshly computed value.
        """
        cached = await self._lookup(signature)
        if cached is not _MISS:
            return cached

        value = await compute()
        await self.store(signature, value, ttl)
        return value

    async def invalidate_path(self, path: str) -> int:
        """Drop cached GET responses for ``path`` and every path below it.

        Args:
            path: Resource path, e.g. ``/articles``.

        Returns:
            Number of entries removed.
        """
        count = 0
        for pattern in self._key_builder.build_path_patterns(CACHEABLE_METHOD, path):
            count += await self._backend.delete_pattern(pattern)

        if count:
            logger.info("invalidated %d cached responses under %s", count, path)
        return count

    async def clear(self) -> None:
        """Clear all cached entries and reset statistics."""
        await self._backend.clear()
        self._hits = 0
        self._misses = 0
