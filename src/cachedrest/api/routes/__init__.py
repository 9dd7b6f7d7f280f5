"""HTTP routers."""

from cachedrest.api.routes import articles, cache, employees, users

__all__ = ["articles", "cache", "employees", "users"]
