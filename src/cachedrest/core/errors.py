"""Error hierarchy for cachedrest."""


class CachedRestError(Exception):
    """Base exception for errors surfaced to API clients."""

    code = "internal_error"
    http_status = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict[str, str]:
        """Convert to the JSON error body returned to clients."""
        return {"error": self.message}


class DuplicateResourceError(CachedRestError):
    """Raised when a record would break a uniqueness constraint.

    The operation that raised it must not have mutated any state.
    """

    code = "duplicate_resource"
    http_status = 400

    def __init__(self, resource: str, field: str, value: str) -> None:
        super().__init__(f"{resource} already exists")
        self.resource = resource
        self.field = field
        self.value = value
