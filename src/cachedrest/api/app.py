"""
Application factory.

``create_app`` wires the store, the filter engine, user registration and
the response cache into a FastAPI application.  Each collaborator can be
passed in; anything omitted is built from ``Settings``.  Run it with::

    uvicorn cachedrest.api.app:create_app --factory

or ``python -m cachedrest``.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from cachedrest.api.error_handlers import register_error_handlers
from cachedrest.api.middleware import ResponseCacheMiddleware
from cachedrest.api.routes import articles, cache, employees, users
from cachedrest.config import Settings, settings as default_settings
from cachedrest.core.interfaces.resource_store import IResourceStore
from cachedrest.core.services.filter_engine import FilterEngine
from cachedrest.core.services.response_cache import ResponseCache
from cachedrest.core.services.user_registration import UserRegistration
from cachedrest.infrastructure.backends.memory import InMemoryCacheBackend
from cachedrest.infrastructure.key_builders.default import DefaultKeyBuilder
from cachedrest.infrastructure.serializers.json import JsonSerializer
from cachedrest.infrastructure.stores.memory import InMemoryResourceStore
from cachedrest.logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_response_cache(settings: Settings) -> ResponseCache:
    """Build the in-memory response cache described by ``settings``."""
    config = settings.cache_config()
    return ResponseCache(
        backend=InMemoryCacheBackend(
            maxsize=config.max_size,
            default_ttl=settings.cache_ttl_seconds,
        ),
        key_builder=DefaultKeyBuilder(prefix=config.key_prefix),
        serializer=JsonSerializer(),
        config=config,
    )


def is_cacheable_path(path: str) -> bool:
    """False for the cache administration routes under ``/cache``."""
    return path != cache.PREFIX and not path.startswith(cache.PREFIX + "/")


def create_app(
    settings: Settings | None = None,
    store: IResourceStore | None = None,
    response_cache: ResponseCache | None = None,
    filter_engine: FilterEngine | None = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level)

    store = store or InMemoryResourceStore()
    response_cache = response_cache or build_response_cache(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "%s started (cache enabled=%s, ttl=%s)",
            settings.app_name,
            response_cache.config.enabled,
            response_cache.config.default_ttl,
        )
        yield
        logger.info("%s shutting down", settings.app_name)

    app = FastAPI(
        title=settings.app_name, version=settings.app_version, lifespan=lifespan,
    )

    app.state.store = store
    app.state.filter_engine = filter_engine or FilterEngine()
    app.state.registration = UserRegistration(store)
    app.state.response_cache = response_cache

    app.add_middleware(
        ResponseCacheMiddleware,
        response_cache=response_cache,
        should_cache=is_cacheable_path,
    )
    register_error_handlers(app)

    app.include_router(articles.router)
    app.include_router(users.router)
    app.include_router(employees.router)
    app.include_router(cache.router)

    return app
