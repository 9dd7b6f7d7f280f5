"""ASGI middleware putting the response cache in front of GET routes."""

import logging
from collections.abc import Callable

from starlette.datastructures import MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from cachedrest.core.entities.request_signature import RequestSignature
from cachedrest.core.services.response_cache import ResponseCache

logger = logging.getLogger(__name__)

CACHE_STATUS_HEADER = "x-cache"


def resource_root(path: str) -> str:
    """Return the first path segment, e.g. ``/articles`` for ``/articles/7``."""
    return "/" + path.strip("/").split("/", 1)[0]


class ResponseCacheMiddleware:
    """Serves repeated GET requests from a ResponseCache.

    On a hit the stored status, headers and body are replayed without
    calling the application. On a miss the application runs and its
    response is stored if the status is cacheable. Bodies are kept as
    latin-1 text so arbitrary bytes survive the JSON serializer.

    Other methods go straight to the application. When the cache config
    has ``invalidate_on_write`` set, a successful write also drops cached
    GET responses for the written resource.
    """

    def __init__(
        self,
        app: ASGIApp,
        response_cache: ResponseCache,
        should_cache: Callable[[str], bool] | None = None,
    ) -> None:
        self.app = app
        self._cache = response_cache
        self._should_cache = should_cache

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        signature = RequestSignature.from_components(
            scope["method"], scope["path"], scope.get("query_string", b"")
        )

        if not self._cache.is_cacheable(signature):
            if signature.method != "GET" and self._cache.config.invalidate_on_write:
                await self._call_and_invalidate(signature, scope, receive, send)
            else:
                await self.app(scope, receive, send)
            return

        if self._should_cache is not None and not self._should_cache(signature.path):
            await self.app(scope, receive, send)
            return

        cached = await self._cache.lookup(signature)
        if cached is not None:
            await self._replay(cached, send)
            return

        await self._call_and_store(signature, scope, receive, send)

    async def _replay(self, cached: dict, send: Send) -> None:
        headers = [
            (name.encode("latin-1"), value.encode("latin-1"))
            for name, value in cached["headers"]
        ]
        headers.append((CACHE_STATUS_HEADER.encode("latin-1"), b"HIT"))

        await send({
            "type": "http.response.start",
            "status": cached["status"],
            "headers": headers,
        })
        await send({
            "type": "http.response.body",
            "body": cached["body"].encode("latin-1"),
        })

    async def _call_and_store(
        self,
        signature: RequestSignature,
        scope: Scope,
        receive: Receive,
        send: Send,
    ) -> None:
        status = 0
        raw_headers: list[tuple[bytes, bytes]] = []
        body = bytearray()

        async def capture(message: Message) -> None:
            nonlocal status, raw_headers
            if message["type"] == "http.response.start":
                status = message["status"]
                raw_headers = list(message.setdefault("headers", []))
                headers = MutableHeaders(scope=message)
                headers.append(CACHE_STATUS_HEADER, "MISS")
            elif message["type"] == "http.response.body":
                body.extend(message.get("body", b""))
                if not message.get("more_body", False):
                    await send(message)
                    await self._store(signature, status, raw_headers, bytes(body))
                    return
            await send(message)

        await self.app(scope, receive, capture)

    async def _store(
        self,
        signature: RequestSignature,
        status: int,
        raw_headers: list[tuple[bytes, bytes]],
        body: bytes,
    ) -> None:
        if status not in self._cache.config.cacheable_status_codes:
            logger.debug("not caching %s %s: status %d", signature.method, signature.path, status)
            return

        await self._cache.store(signature, {
            "status": status,
            "headers": [
                [name.decode("latin-1"), value.decode("latin-1")]
                for name, value in raw_headers
            ],
            "body": body.decode("latin-1"),
        })

    async def _call_and_invalidate(
        self,
        signature: RequestSignature,
        scope: Scope,
        receive: Receive,
        send: Send,
    ) -> None:
        status = 0

        async def capture(message: Message) -> None:
            nonlocal status
            if message["type"] == "http.response.start":
                status = message["status"]
            await send(message)

        await self.app(scope, receive, capture)

        if 200 <= status < 300:
            await self._cache.invalidate_path(resource_root(signature.path))
