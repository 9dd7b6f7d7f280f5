"""Cache backend implementations."""

from cachedrest.infrastructure.backends.memory import InMemoryCacheBackend

__all__ = ["InMemoryCacheBackend"]
