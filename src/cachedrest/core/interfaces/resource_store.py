"""Resource store interface."""

from contextlib import AbstractContextManager
from typing import Protocol

from cachedrest.core.entities.records import Employee, User


class IResourceStore(Protocol):
    """Contract for the store owning the employee and user collections."""

    def employees(self) -> list[Employee]:
        """Return a snapshot of the employee collection, in order."""
        ...

    def users(self) -> list[User]:
        """Return a snapshot of the user collection, in order."""
        ...

    def add_user(self, user: User) -> None:
        """Append a user. Callers check uniqueness first."""
        ...

    def locked(self) -> AbstractContextManager[None]:
        """Hold the store's write lock for a check-then-insert sequence."""
        ...
