"""In-memory resource store."""

import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from cachedrest.core.entities.records import Employee, User

SAMPLE_EMPLOYEES = (
    Employee(first_name="Jane", last_name="Smith", age=20),
    Employee(first_name="John", last_name="Smith", age=30),
    Employee(first_name="Mary", last_name="Green", age=50),
)

SAMPLE_USERS = (User(email="abc@foo.com"),)


class InMemoryResourceStore:
    """Process-local store for employees and users.

    Employees are fixed at construction. Users can only be appended.
    Reads return copies so callers never observe a later append halfway
    through iterating. Nothing survives a restart.
    """

    def __init__(
        self,
        employees: Iterable[Employee] = SAMPLE_EMPLOYEES,
        users: Iterable[User] = SAMPLE_USERS,
    ) -> None:
        self._employees: tuple[Employee, ...] = tuple(employees)
        self._users: list[User] = list(users)
        self._lock = threading.RLock()

    def employees(self) -> list[Employee]:
        return list(self._employees)

    def users(self) -> list[User]:
        with self._lock:
            return list(self._users)

    def add_user(self, user: User) -> None:
        with self._lock:
            self._users.append(user)

    @contextmanager
    def locked(self) -> Iterator[None]:
        """Hold the write lock; reads inside the block see a stable view."""
        with self._lock:
            yield
