"""User aggregate.

The User is the account aggregate root. It owns its subscriptions and wallets
and carries the state changed by the account lifecycle: role switching,
active-status switching, and profile edits.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID

from smart_wallet.domain.entities import Subscription, Wallet
from smart_wallet.domain.value_objects import Country, UserRole

# pylint: disable=too-many-instance-attributes


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(eq=False)
class User:
    """Account aggregate root.

    Entities compare by identity (``eq=False``) so instances stay hashable
    and can be tracked by an ORM session.
    """

    id: UUID | None = None
    username: str | None = None
    password: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    profile_picture: str | None = None
    role: UserRole = UserRole.USER
    is_active: bool = True
    country: Country | None = None
    created_on: datetime | None = None
    updated_on: datetime | None = None
    subscriptions: list[Subscription] = field(default_factory=list)
    wallets: list[Wallet] = field(default_factory=list)

    # --- Factory ---

    @classmethod
    def register(
        cls,
        user_id: UUID,
        username: str,
        password_hash: str,
        country: Country,
        now: datetime | None = None,
    ) -> User:
        """Create a freshly registered user (role USER, active)."""
        now = now or _utcnow()
        return cls(
            id=user_id,
            username=username,
            password=password_hash,
            role=UserRole.USER,
            is_active=True,
            country=country,
            created_on=now,
            updated_on=now,
        )

    # --- Lifecycle ---

    def switch_role(self) -> None:
        """Toggle the role between USER and ADMIN."""
        self.role = self.role.toggled()
        self._touch()

    def switch_status(self) -> None:
        """Flip the active flag."""
        self.is_active = not self.is_active
        self._touch()

    def update_profile(
        self,
        first_name: str | None,
        last_name: str | None,
        email: str | None,
        profile_picture: str | None,
    ) -> None:
        """Overwrite the profile fields verbatim (empty strings included)."""
        self.first_name = first_name
        self.last_name = last_name
        self.email = email
        self.profile_picture = profile_picture
        self._touch()

    def add_subscription(self, subscription: Subscription) -> None:
        """Attach a subscription to this user."""
        subscription.owner_id = self.id
        self.subscriptions.append(subscription)

    def add_wallet(self, wallet: Wallet) -> None:
        """Attach a wallet to this user."""
        wallet.owner_id = self.id
        self.wallets.append(wallet)

    def _touch(self) -> None:
        self.updated_on = _utcnow()
