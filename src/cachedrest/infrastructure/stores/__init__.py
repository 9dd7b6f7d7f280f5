"""Resource store implementations."""

from cachedrest.infrastructure.stores.memory import (
    SAMPLE_EMPLOYEES,
    SAMPLE_USERS,
    InMemoryResourceStore,
)

__all__ = ["InMemoryResourceStore", "SAMPLE_EMPLOYEES", "SAMPLE_USERS"]
