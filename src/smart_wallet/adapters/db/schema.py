"""Account schema.

Defines the tables backing the User aggregate and the notification preference
store:

| Table                      | Holds                                     |
|----------------------------|-------------------------------------------|
| users                      | one row per account                       |
| subscriptions              | subscriptions, FK to their owning user    |
| wallets                    | wallets, FK to their owning user          |
| notification_preferences   | one row per user (opt-in and address)     |

Schema changes are applied through the Alembic migrations in
``smart_wallet.adapters.db.alembic``; keep both in sync.
"""

from __future__ import annotations

from sqlalchemy import (
    Boolean,
    Column,
    Enum,
    ForeignKey,
    Numeric,
    String,
    Table,
    Uuid,
)

from smart_wallet.domain.value_objects import (
    Country,
    SubscriptionPeriod,
    SubscriptionStatus,
    SubscriptionType,
    UserRole,
    WalletStatus,
)

from .metadata import metadata
from .sa_types import UTCDateTime

__all__ = ["users", "subscriptions", "wallets", "notification_preferences"]

users = Table(
    "users",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("username", String(100), nullable=False, unique=True),
    Column("password", String(255), nullable=False),
    Column("first_name", String(100)),
    Column("last_name", String(100)),
    Column("email", String(255)),
    Column("profile_picture", String(2048)),
    Column("role", Enum(UserRole, name="user_role"), nullable=False),
    Column("is_active", Boolean, nullable=False),
    Column("country", Enum(Country, name="country")),
    Column("created_on", UTCDateTime),
    Column("updated_on", UTCDateTime),
)

subscriptions = Table(
    "subscriptions",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("owner_id", Uuid, ForeignKey("users.id"), nullable=False, index=True),
    Column(
        "status", Enum(SubscriptionStatus, name="subscription_status"), nullable=False
    ),
    Column(
        "period", Enum(SubscriptionPeriod, name="subscription_period"), nullable=False
    ),
    Column("type", Enum(SubscriptionType, name="subscription_type"), nullable=False),
    Column("price", Numeric(19, 2), nullable=False),
    Column("renewal_allowed", Boolean, nullable=False),
    Column("created_on", UTCDateTime),
    Column("completed_on", UTCDateTime),
)

wallets = Table(
    "wallets",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("owner_id", Uuid, ForeignKey("users.id"), nullable=False, index=True),
    Column("status", Enum(WalletStatus, name="wallet_status"), nullable=False),
    Column("balance", Numeric(19, 2), nullable=False),
    Column("currency", String(3), nullable=False),
    Column("created_on", UTCDateTime),
    Column("updated_on", UTCDateTime),
)

notification_preferences = Table(
    "notification_preferences",
    metadata,
    Column("user_id", Uuid, primary_key=True),
    Column("enabled", Boolean, nullable=False),
    Column("contact_info", String(255)),
    Column("updated_on", UTCDateTime),
)
