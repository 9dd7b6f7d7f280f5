"""Core domain layer for cachedrest."""

from cachedrest.core.entities import (
    CacheConfig,
    CacheEntry,
    Employee,
    QuerySpec,
    RequestSignature,
    User,
)
from cachedrest.core.errors import CachedRestError, DuplicateResourceError
from cachedrest.core.interfaces import (
    ICacheBackend,
    IKeyBuilder,
    IResourceStore,
    ISerializer,
)
from cachedrest.core.services import (
    FilterEngine,
    ResponseCache,
    UniquenessGuard,
    UserRegistration,
)

__all__ = [
    # Entities
    "CacheConfig",
    "CacheEntry",
    "RequestSignature",
    "Employee",
    "User",
    "QuerySpec",
    # Errors
    "CachedRestError",
    "DuplicateResourceError",
    # Interfaces
    "ICacheBackend",
    "IKeyBuilder",
    "ISerializer",
    "IResourceStore",
    # Services
    "ResponseCache",
    "FilterEngine",
    "UniquenessGuard",
    "UserRegistration",
]
