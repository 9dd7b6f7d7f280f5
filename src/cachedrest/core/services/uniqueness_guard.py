"""Uniqueness guard - single-field uniqueness check for new users."""

from collections.abc import Iterable

from cachedrest.core.entities.records import User
from cachedrest.core.errors import DuplicateResourceError


class UniquenessGuard:
    """Rejects a candidate email that an existing user already has.

    Comparison is exact and case-sensitive. The guard only checks; the
    caller inserts the record once the check passes.
    """

    resource = "User"
    field = "email"

    def is_unique(self, email: str, users: Iterable[User]) -> bool:
        return all(user.email != email for user in users)

    def ensure_unique(self, email: str, users: Iterable[User]) -> None:
        """Accept ``email`` or raise.

        Raises:
            DuplicateResourceError: If a user with ``email`` already exists.
        """
        if not self.is_unique(email, users):
            raise DuplicateResourceError(self.resource, self.field, email)
