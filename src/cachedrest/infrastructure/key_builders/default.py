"""Default key builder implementation."""

import glob

from cachedrest.core.entities.request_signature import RequestSignature
from cachedrest.utils.hashing import hash_value


class DefaultKeyBuilder:
    """Default key builder using method, path and a hash of the query.

    Keys look like ``cachedrest:GET:/employees:q:<hash>``; the ``q:`` part
    is left out when the request has no query parameters.
    """

    def __init__(self, prefix: str = "cachedrest") -> None:
        """Initialize the key builder.

        Args:
            prefix: Prefix for all cache keys.
        """
        self._prefix = prefix

    def build(self, signature: RequestSignature) -> str:
        """Build unique cache key for a request.

        Args:
            signature: The request identity.

        Returns:
            A unique string key for caching the response.
        """
        parts = [self._prefix, signature.method, signature.path]

        if signature.query:
            query_hash = hash_value([list(pair) for pair in signature.query])
            parts.append(f"q:{query_hash}")

        return ":".join(parts)

    def build_path_patterns(self, method: str, path: str) -> list[str]:
        """Build glob patterns matching keys for ``path`` and paths below it.

        Args:
            method: HTTP method the keys were built for.
            path: Resource path, e.g. ``/articles``.

        Returns:
            Glob patterns for ``ICacheBackend.delete_pattern``.
        """
        root = glob.escape(path.rstrip("/"))
        base = f"{self._prefix}:{method.upper()}:{root}"
        return [base, f"{base}:q:*", f"{base}/*"]
