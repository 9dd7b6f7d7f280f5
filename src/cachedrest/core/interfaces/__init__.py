"""Core interfaces (Protocol classes) for cachedrest."""

from cachedrest.core.interfaces.cache_backend import ICacheBackend
from cachedrest.core.interfaces.key_builder import IKeyBuilder
from cachedrest.core.interfaces.resource_store import IResourceStore
from cachedrest.core.interfaces.serializer import ISerializer

__all__ = [
    "ICacheBackend",
    "IKeyBuilder",
    "ISerializer",
    "IResourceStore",
]
