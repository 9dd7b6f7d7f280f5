"""Infrastructure layer implementations for cachedrest."""

from cachedrest.infrastructure.backends import InMemoryCacheBackend
from cachedrest.infrastructure.key_builders import DefaultKeyBuilder
from cachedrest.infrastructure.serializers import JsonSerializer
from cachedrest.infrastructure.stores import InMemoryResourceStore

__all__ = [
    "InMemoryCacheBackend",
    "DefaultKeyBuilder",
    "JsonSerializer",
    "InMemoryResourceStore",
]
