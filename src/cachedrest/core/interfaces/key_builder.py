"""Key builder interface."""

from typing import Protocol

from cachedrest.core.entities.request_signature import RequestSignature


class IKeyBuilder(Protocol):
    """Contract for building cache keys from request signatures."""

    def build(self, signature: RequestSignature) -> str:
        """Build a unique cache key for a request.

        Args:
            signature: The request identity.

        Returns:
            A key that differs for every distinct method, path and query.
        """
        ...

    def build_path_patterns(self, method: str, path: str) -> list[str]:
        """Build glob patterns matching every key for ``path`` and below it.

        Args:
            method: HTTP method the keys were built for.
            path: Resource path prefix.

        Returns:
            Glob patterns usable with ``ICacheBackend.delete_pattern``.
        """
        ...
