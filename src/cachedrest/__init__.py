"""cachedrest - small resource API with a filterable employee listing and a
time-windowed response cache.

The pieces can be used without the HTTP layer:

    from cachedrest import (
        FilterEngine,
        InMemoryResourceStore,
        QuerySpec,
        RequestSignature,
        ResponseCache,
        InMemoryCacheBackend,
        DefaultKeyBuilder,
        JsonSerializer,
    )

    store = InMemoryResourceStore()
    smiths = FilterEngine().apply(store.employees(), QuerySpec(last_name="Smith"))

    cache = ResponseCache(
        backend=InMemoryCacheBackend(),
        key_builder=DefaultKeyBuilder(),
        serializer=JsonSerializer(),
    )
    signature = RequestSignature.from_components("GET", "/employees", "lastName=Smith")
    await cache.store(signature, [e.to_dict() for e in smiths])

Serving it over HTTP:

    uvicorn cachedrest.api.app:create_app --factory
"""

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
from cachedrest.infrastructure import (
    DefaultKeyBuilder,
    InMemoryCacheBackend,
    InMemoryResourceStore,
    JsonSerializer,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "CacheConfig",
    "CacheEntry",
    "RequestSignature",
    "Employee",
    "User",
    "QuerySpec",
    # Errors
    "CachedRestError",
    "DuplicateResourceError",
    # Core interfaces
    "ICacheBackend",
    "IKeyBuilder",
    "ISerializer",
    "IResourceStore",
    # Core services
    "ResponseCache",
    "FilterEngine",
    "UniquenessGuard",
    "UserRegistration",
    # Infrastructure implementations
    "InMemoryCacheBackend",
    "DefaultKeyBuilder",
    "JsonSerializer",
    "InMemoryResourceStore",
]
