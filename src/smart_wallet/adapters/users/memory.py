"""In-memory implementation of the UserRepository interface.

Users are kept in a plain dict keyed by id. Objects are stored by reference,
so mutations made after `save` are visible to later lookups, the same way an
ORM identity map behaves. Intended for tests and demos.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from smart_wallet.interfaces.user_repository import UserRepository

if TYPE_CHECKING:
    from uuid import UUID

    from smart_wallet.domain.aggregates import User


class InMemoryUserRepository(UserRepository):
    """Dict-backed user repository."""

    def __init__(self, users: dict[UUID, User] | None = None) -> None:
        self._users: dict[UUID, User] = users if users is not None else {}

    def get(self, user_id: UUID) -> User | None:
        return self._users.get(user_id)

    def find_by_username(self, username: str) -> User | None:
        return next(
            (user for user in self._users.values() if user.username == username),
            None,
        )

    def list_all(self) -> list[User]:
        return list(self._users.values())

    def save(self, user: User) -> User:
        if user.id is None:
            raise ValueError("Cannot save a user without an id.")
        self._users[user.id] = user
        return user
