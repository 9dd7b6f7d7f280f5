"""Domain services for cachedrest."""

from cachedrest.core.services.filter_engine import FilterEngine
from cachedrest.core.services.response_cache import ResponseCache
from cachedrest.core.services.uniqueness_guard import UniquenessGuard
from cachedrest.core.services.user_registration import UserRegistration

__all__ = [
    "ResponseCache",
    "FilterEngine",
    "UniquenessGuard",
    "UserRegistration",
]
