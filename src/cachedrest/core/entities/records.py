"""Resource records held by the store."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Employee:
    """An employee. Read-only for the lifetime of the process."""

    first_name: str
    last_name: str
    age: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "age": self.age,
        }


@dataclass(frozen=True)
class User:
    """A registered user, unique by ``email``."""

    email: str

    def to_dict(self) -> dict[str, Any]:
        return {"email": self.email}
