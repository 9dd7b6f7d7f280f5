"""Domain entities for cachedrest."""

from cachedrest.core.entities.cache_config import CacheConfig
from cachedrest.core.entities.cache_entry import CacheEntry
from cachedrest.core.entities.query_spec import QuerySpec
from cachedrest.core.entities.records import Employee, User
from cachedrest.core.entities.request_signature import RequestSignature

__all__ = [
    "CacheConfig",
    "CacheEntry",
    "RequestSignature",
    "Employee",
    "User",
    "QuerySpec",
]
