"""HTTP layer for cachedrest."""

from cachedrest.api.app import create_app

__all__ = ["create_app"]
