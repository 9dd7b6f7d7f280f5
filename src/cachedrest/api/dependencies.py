"""FastAPI dependencies handing the shared services to route handlers."""

from fastapi import Request

from cachedrest.core.interfaces.resource_store import IResourceStore
from cachedrest.core.services.filter_engine import FilterEngine
from cachedrest.core.services.response_cache import ResponseCache
from cachedrest.core.services.user_registration import UserRegistration


def get_store(request: Request) -> IResourceStore:
    return request.app.state.store


def get_filter_engine(request: Request) -> FilterEngine:
    return request.app.state.filter_engine


def get_registration(request: Request) -> UserRegistration:
    return request.app.state.registration


def get_response_cache(request: Request) -> ResponseCache:
    return request.app.state.response_cache
