"""Entities owned by the User aggregate."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from .value_objects import (
    SubscriptionPeriod,
    SubscriptionStatus,
    SubscriptionType,
    WalletStatus,
)

# pylint: disable=too-many-instance-attributes


@dataclass(eq=False)
class Subscription:
    """A subscription plan owned by a single user."""

    id: UUID | None = None
    owner_id: UUID | None = None
    status: SubscriptionStatus = SubscriptionStatus.ACTIVE
    period: SubscriptionPeriod = SubscriptionPeriod.MONTHLY
    type: SubscriptionType = SubscriptionType.DEFAULT
    price: Decimal = Decimal("0.00")
    renewal_allowed: bool = True
    created_on: datetime | None = None
    completed_on: datetime | None = None


@dataclass(eq=False)
class Wallet:
    """A wallet owned by a single user."""

    id: UUID | None = None
    owner_id: UUID | None = None
    status: WalletStatus = WalletStatus.ACTIVE
    balance: Decimal = Decimal("0.00")
    currency: str = "EUR"
    created_on: datetime | None = None
    updated_on: datetime | None = None
