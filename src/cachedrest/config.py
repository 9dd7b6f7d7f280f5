"""
Application configuration read from environment variables.

``Settings`` is a plain dataclass whose defaults are read from the
environment when this module is imported, so variables must be set
before the first import. Tests build their own ``Settings`` instead.
"""

import os
from dataclasses import dataclass
from datetime import timedelta

from cachedrest.core.entities.cache_config import CacheConfig


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    app_name: str = os.getenv("APP_NAME", "cachedrest")
    app_version: str = os.getenv("APP_VERSION", "0.1.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Response cache.  ``cache_ttl_seconds`` is how long a GET response is
    # served from memory before the handler runs again.
    cache_enabled: bool = _env_bool("CACHE_ENABLED", "true")
    cache_ttl_seconds: float = float(os.getenv("CACHE_TTL_SECONDS", "300"))
    cache_max_size: int = int(os.getenv("CACHE_MAX_SIZE", "1000"))

    # When true, a successful write to /<resource>/... drops cached GET
    # responses under /<resource>.  Off by default: cached listings may
    # then lag behind writes for up to ``cache_ttl_seconds``.
    cache_invalidate_on_write: bool = _env_bool("CACHE_INVALIDATE_ON_WRITE", "false")

    def cache_config(self) -> CacheConfig:
        """Build the ``CacheConfig`` these settings describe."""
        return CacheConfig(
            enabled=self.cache_enabled,
            default_ttl=timedelta(seconds=self.cache_ttl_seconds),
            max_size=self.cache_max_size,
            invalidate_on_write=self.cache_invalidate_on_write,
        )


settings = Settings()
