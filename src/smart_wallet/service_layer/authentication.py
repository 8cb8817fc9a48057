"""Authentication view of a user."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from smart_wallet.domain.value_objects import UserRole

if TYPE_CHECKING:
    from uuid import UUID

ROLE_PREFIX = "ROLE_"


@dataclass(frozen=True)
class AuthenticationMetadata:
    """Credentials and authorities needed to authenticate a user.

    Attributes:
        user_id: The user's identifier.
        username: The username the lookup was made with.
        password: The stored password hash.
        is_active: Whether the account may log in.
        role: The user's role.
    """

    user_id: UUID | None
    username: str
    password: str | None
    is_active: bool
    role: UserRole

    @property
    def authorities(self) -> frozenset[str]:
        """The single authority granted by the role, e.g. ``ROLE_ADMIN``."""
        return frozenset({f"{ROLE_PREFIX}{self.role.name}"})

    @property
    def is_enabled(self) -> bool:
        """Alias of `is_active`, as authentication frameworks name it."""
        return self.is_active
