"""Cache administration endpoints. Responses here are never cached."""

from typing import Any

from fastapi import APIRouter, Depends

from cachedrest.api.dependencies import get_response_cache
from cachedrest.core.services.response_cache import ResponseCache

PREFIX = "/cache"

router = APIRouter(prefix=PREFIX, tags=["cache"])


@router.get("/stats")
async def cache_stats(
    response_cache: ResponseCache = Depends(get_response_cache),
) -> dict[str, Any]:
    config = response_cache.config
    return {
        "stats": response_cache.stats,
        "config": {
            "enabled": config.enabled,
            "default_ttl_seconds": config.default_ttl.total_seconds() if config.default_ttl else None,
            "max_size": config.max_size,
            "key_prefix": config.key_prefix,
            "invalidate_on_write": config.invalidate_on_write,
        },
    }


@router.post("/clear")
async def clear_cache(
    response_cache: ResponseCache = Depends(get_response_cache),
) -> dict[str, str]:
    await response_cache.clear()
    return {"status": "cleared"}
