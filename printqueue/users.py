"""Registered users of the print system."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator, Optional


class UserType(enum.IntEnum):
    """Kind of user; a higher value means a higher print priority."""

    STUDENT = 1
    TEACHER = 2
    ADMINISTRATION = 3
    DIRECTION = 3


@dataclass(eq=False)
class User:
    """A person allowed to request print jobs."""

    name: str
    cpf: int
    user_type: UserType

    def __post_init__(self) -> None:
        self.user_type = UserType(self.user_type)


class UserRegistry:
    """Users in order of registration, most recent first."""

    def __init__(self) -> None:
        self._users: list[User] = []

    def add(self, name: str, cpf: int, user_type: UserType | int) -> User:
        """Register a new user and return it.

        Raises ValueError if ``user_type`` is not a known user type.
        """
        user = User(name, cpf, UserType(user_type))
        self._users.insert(0, user)
        return user

    def remove(self, user: User) -> None:
        """Remove ``user``; raise KeyError if it is not registered."""
        position = next(
            (index for index, candidate in enumerate(self._users) if candidate is user),
            None,
        )
        if position is None:
            raise KeyError(f"user not registered: {user.name!r}")
        del self._users[position]

    def find_by_name(self, name: str) -> Optional[User]:
        """Return the most recently added user with this name, or None."""
        return next((user for user in self._users if user.name == name), None)

    def find_by_cpf(self, cpf: int) -> Optional[User]:
        """Return the most recently added user with this CPF, or None."""
        return next((user for user in self._users if user.cpf == cpf), None)

    def __iter__(self) -> Iterator[User]:
        return iter(self._users)

    def __len__(self) -> int:
        return len(self._users)