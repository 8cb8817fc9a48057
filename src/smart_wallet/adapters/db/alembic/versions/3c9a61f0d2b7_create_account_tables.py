"""create account tables

Revision ID: 3c9a61f0d2b7
Revises:
Create Date: 2026-10-17 10:12:31.482190

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

from smart_wallet.adapters.db.sa_types import UTCDateTime

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3c9a61f0d2b7"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

USER_ROLES = ("USER", "ADMIN")
COUNTRIES = ("BULGARIA", "GERMANY", "FRANCE", "SWITZERLAND")


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("username", sa.String(length=100), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("first_name", sa.String(length=100), nullable=True),
        sa.Column("last_name", sa.String(length=100), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("profile_picture", sa.String(length=2048), nullable=True),
        sa.Column("role", sa.Enum(*USER_ROLES, name="user_role"), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("country", sa.Enum(*COUNTRIES, name="country"), nullable=True),
        sa.Column("created_on", UTCDateTime(), nullable=True),
        sa.Column("updated_on", UTCDateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_users")),
        sa.UniqueConstraint("username", name=op.f("uq_users_username")),
    )

    op.create_table(
        "subscriptions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("owner_id", sa.Uuid(), nullable=False),
        sa.Column(
            "status",
            sa.Enum("ACTIVE", "COMPLETED", "TERMINATED", name="subscription_status"),
            nullable=False,
        ),
        sa.Column(
            "period",
            sa.Enum("MONTHLY", "YEARLY", name="subscription_period"),
            nullable=False,
        ),
        sa.Column(
            "type",
            sa.Enum("DEFAULT", "PREMIUM", "ULTIMATE", name="subscription_type"),
            nullable=False,
        ),
        sa.Column("price", sa.Numeric(precision=19, scale=2), nullable=False),
        sa.Column("renewal_allowed", sa.Boolean(), nullable=False),
        sa.Column("created_on", UTCDateTime(), nullable=True),
        sa.Column("completed_on", UTCDateTime(), nullable=True),
        sa.ForeignKeyConstraint(
            ["owner_id"],
            ["users.id"],
            name=op.f("fk_subscriptions_owner_id_users"),
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_subscriptions")),
    )
    op.create_index(
        op.f("ix_subscriptions_owner_id"), "subscriptions", ["owner_id"], unique=False
    )

    op.create_table(
        "wallets",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("owner_id", sa.Uuid(), nullable=False),
        sa.Column(
            "status", sa.Enum("ACTIVE", "INACTIVE", name="wallet_status"), nullable=False
        ),
        sa.Column("balance", sa.Numeric(precision=19, scale=2), nullable=False),
        sa.Column("currency", sa.String(length=3), nullable=False),
        sa.Column("created_on", UTCDateTime(), nullable=True),
        sa.Column("updated_on", UTCDateTime(), nullable=True),
        sa.ForeignKeyConstraint(
            ["owner_id"],
            ["users.id"],
            name=op.f("fk_wallets_owner_id_users"),
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_wallets")),
    )
    op.create_index(op.f("ix_wallets_owner_id"), "wallets", ["owner_id"], unique=False)

    op.create_table(
        "notification_preferences",
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("enabled", sa.Boolean(), nullable=False),
        sa.Column("contact_info", sa.String(length=255), nullable=True),
        sa.Column("updated_on", UTCDateTime(), nullable=True),
        sa.PrimaryKeyConstraint("user_id", name=op.f("pk_notification_preferences")),
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_table("notification_preferences")
    op.drop_index(op.f("ix_wallets_owner_id"), table_name="wallets")
    op.drop_table("wallets")
    op.drop_index(op.f("ix_subscriptions_owner_id"), table_name="subscriptions")
    op.drop_table("subscriptions")
    op.drop_table("users")
    for enum_name in (
        "wallet_status",
        "subscription_type",
        "subscription_period",
        "subscription_status",
        "country",
        "user_role",
    ):
        sa.Enum(name=enum_name).drop(op.get_bind(), checkfirst=True)
