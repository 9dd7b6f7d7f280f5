"""User registration - atomic uniqueness check followed by insert."""

import logging

from cachedrest.core.entities.records import User
from cachedrest.core.errors import DuplicateResourceError
from cachedrest.core.interfaces.resource_store import IResourceStore
from cachedrest.core.services.uniqueness_guard import UniquenessGuard

logger = logging.getLogger(__name__)


class UserRegistration:
    """Creates users while holding the store lock.

    Holding the lock across check and insert means two concurrent
    registrations of the same email cannot both succeed.
    """

    def __init__(
        self,
        store: IResourceStore,
        guard: UniquenessGuard | None = None,
    ) -> None:
        self._store = store
        self._guard = guard or UniquenessGuard()

    def register(self, email: str) -> User:
        """Register a new user.

        Args:
            email: The new user's email.

        Returns:
            The stored User.

        Raises:
            DuplicateResourceError: If the email is taken. The store is
                left unchanged.
        """
        with self._store.locked():
            try:
                self._guard.ensure_unique(email, self._store.users())
            except DuplicateResourceError:
                logger.warning("rejected registration for existing email %r", email)
                raise

            user = User(email=email)
            self._store.add_user(user)

        logger.info("registered user %r", email)
        return user
