"""Request signature value object."""

from dataclasses import dataclass
from urllib.parse import parse_qsl


@dataclass(frozen=True)
class RequestSignature:
    """Identity of a request for caching purposes.

    Two requests share a signature only when method, path and the full
    set of query parameters (names and values) are equal. Parameters are
    ordered by name so ``?a=1&b=2`` and ``?b=2&a=1`` are the same request;
    repeated names keep their relative order.
    """

    method: str
    path: str
    query: tuple[tuple[str, str], ...] = ()

    @classmethod
    def from_components(
        cls,
        method: str,
        path: str,
        query_string: str | bytes = "",
    ) -> "RequestSignature":
        """Create a RequestSignature from raw request components.

        Args:
            method: HTTP method, case-insensitive.
            path: Request path without the query string.
            query_string: Raw query string (without the leading ``?``).

        Returns:
            A new RequestSignature instance.
        """
        if isinstance(query_string, bytes):
            query_string = query_string.decode("latin-1")

        pairs = parse_qsl(query_string, keep_blank_values=True)
        return cls(
            method=method.upper(),
            path=path,
            query=tuple(sorted(pairs, key=lambda pair: pair[0])),
        )
