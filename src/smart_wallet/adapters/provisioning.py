"""Default provisioning of the subscription and wallet a new user receives.

New accounts start on the free DEFAULT plan, billed monthly, and with a single
EUR wallet holding a welcome balance.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import TYPE_CHECKING

from smart_wallet.domain.entities import Subscription, Wallet
from smart_wallet.domain.errors import WalletAlreadyExistsError
from smart_wallet.domain.value_objects import (
    SubscriptionPeriod,
    SubscriptionStatus,
    SubscriptionType,
    WalletStatus,
)
from smart_wallet.interfaces.provisioning import (
    SubscriptionProvisioner,
    WalletProvisioner,
)

if TYPE_CHECKING:
    from smart_wallet.domain.aggregates import User
    from smart_wallet.interfaces.id_generator import IdGenerator

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods

DEFAULT_SUBSCRIPTION_PRICE = Decimal("0.00")
DEFAULT_SUBSCRIPTION_LENGTH = timedelta(days=30)  # one monthly billing term
INITIAL_WALLET_BALANCE = Decimal("20.00")
DEFAULT_CURRENCY = "EUR"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DefaultSubscriptionProvisioner(SubscriptionProvisioner):
    """Create an active, monthly DEFAULT subscription."""

    def __init__(self, id_generator: IdGenerator) -> None:
        self._id_generator = id_generator

    def create_default_subscription(self, user: User) -> Subscription:
        now = _utcnow()
        subscription = Subscription(
            id=self._id_generator.new_id(),
            owner_id=user.id,
            status=SubscriptionStatus.ACTIVE,
            period=SubscriptionPeriod.MONTHLY,
            type=SubscriptionType.DEFAULT,
            price=DEFAULT_SUBSCRIPTION_PRICE,
            renewal_allowed=True,
            created_on=now,
            completed_on=now + DEFAULT_SUBSCRIPTION_LENGTH,
        )
        logger.debug(
            "Created %s subscription %s for user %s",
            subscription.type.name,
            subscription.id,
            user.id,
        )
        return subscription


class DefaultWalletProvisioner(WalletProvisioner):
    """Create the first wallet of a user with the welcome balance."""

    def __init__(
        self,
        id_generator: IdGenerator,
        initial_balance: Decimal = INITIAL_WALLET_BALANCE,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._id_generator = id_generator
        self._initial_balance = initial_balance
        self._currency = currency

    def initialize_first_wallet(self, user: User) -> Wallet:
        if user.wallets:
            raise WalletAlreadyExistsError(user.id)

        now = _utcnow()
        wallet = Wallet(
            id=self._id_generator.new_id(),
            owner_id=user.id,
            status=WalletStatus.ACTIVE,
            balance=self._initial_balance,
            currency=self._currency,
            created_on=now,
            updated_on=now,
        )
        logger.debug(
            "Created wallet %s (%s %s) for user %s",
            wallet.id,
            wallet.balance,
            wallet.currency,
            user.id,
        )
        return wallet
