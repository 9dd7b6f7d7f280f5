"""Cache key builder implementations."""

from cachedrest.infrastructure.key_builders.default import DefaultKeyBuilder

__all__ = ["DefaultKeyBuilder"]
