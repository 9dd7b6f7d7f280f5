"""Global exception handlers mapping domain errors to JSON responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cachedrest.core.errors import CachedRestError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(CachedRestError)
    async def cachedrest_error_handler(request: Request, exc: CachedRestError):
        logger.warning(
            "%s on %s %s: %s",
            exc.code, request.method, request.url.path, exc.message,
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )
