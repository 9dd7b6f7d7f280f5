"""Cache configuration entity."""

from dataclasses import dataclass
from datetime import timedelta


@dataclass
class CacheConfig:
    """Response cache configuration.

    Controls whether GET responses are memoized, for how long, how many
    entries are kept, and whether writes invalidate cached reads.

    Staleness:
        With ``invalidate_on_write=False`` (the default) a write to a
        resource leaves previously cached listings of that resource in
        place until their TTL runs out.
    """

    enabled: bool = True
    default_ttl: timedelta | None = None
    max_size: int = 1000
    key_prefix: str = "cachedrest"

    # Only responses with these status codes are stored
    cacheable_status_codes: tuple[int, ...] = (200,)

    # Invalidation
    invalidate_on_write: bool = False

    def __post_init__(self) -> None:
        """Set default TTL if not provided."""
        if self.default_ttl is None:
            self.default_ttl = timedelta(minutes=5)
