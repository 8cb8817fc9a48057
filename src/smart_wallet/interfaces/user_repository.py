"""Interface for the User repository."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from uuid import UUID

    from smart_wallet.domain.aggregates import User


class UserRepository(abc.ABC):
    """Contract for persisting and retrieving User aggregates."""

    @abc.abstractmethod
    def get(self, user_id: UUID) -> User | None:
        """Get a user by its identifier.

        Args:
            user_id: The unique identifier of the user.

        Returns:
            The user if found, otherwise None.
        """

    @abc.abstractmethod
    def find_by_username(self, username: str) -> User | None:
        """Get a user by its username.

        Args:
            username: The username to look up (exact match).

        Returns:
            The user if found, otherwise None.
        """

    @abc.abstractmethod
    def list_all(self) -> list[User]:
        """Return every persisted user."""

    @abc.abstractmethod
    def save(self, user: User) -> User:
        """Persist a user (insert or update) and return the persisted instance.

        Args:
            user: The user to persist.

        Returns:
            The persisted user. Callers must continue with the returned
            instance rather than the argument.
        """
