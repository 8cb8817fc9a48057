"""Unit tests for the default subscription and wallet provisioners."""

import uuid
from datetime import timedelta
from decimal import Decimal

import pytest

from smart_wallet.adapters.id_generators import SimpleIdGenerator
from smart_wallet.adapters.provisioning import (
    DefaultSubscriptionProvisioner,
    DefaultWalletProvisioner,
)
from smart_wallet.domain.aggregates import User
from smart_wallet.domain.entities import Wallet
from smart_wallet.domain.errors import WalletAlreadyExistsError
from smart_wallet.domain.value_objects import (
    SubscriptionPeriod,
    SubscriptionStatus,
    SubscriptionType,
    WalletStatus,
)


def test_default_subscription():
    """The default subscription is a free, active, monthly DEFAULT plan."""
    user = User(id=uuid.uuid4())

    subscription = DefaultSubscriptionProvisioner(
        SimpleIdGenerator()
    ).create_default_subscription(user)

    assert subscription.id == uuid.UUID(int=1)
    assert subscription.owner_id == user.id
    assert subscription.status is SubscriptionStatus.ACTIVE
    assert subscription.period is SubscriptionPeriod.MONTHLY
    assert subscription.type is SubscriptionType.DEFAULT
    assert subscription.price == Decimal("0.00")
    assert subscription.renewal_allowed is True
    assert subscription.completed_on - subscription.created_on == timedelta(days=30)


def test_first_wallet():
    """The first wallet is active with the welcome balance in EUR."""
    user = User(id=uuid.uuid4())

    wallet = DefaultWalletProvisioner(SimpleIdGenerator()).initialize_first_wallet(user)

    assert wallet.owner_id == user.id
    assert wallet.status is WalletStatus.ACTIVE
    assert wallet.balance == Decimal("20.00")
    assert wallet.currency == "EUR"


def test_first_wallet_custom_balance():
    """Balance and currency can be configured."""
    provisioner = DefaultWalletProvisioner(
        SimpleIdGenerator(), initial_balance=Decimal("5.00"), currency="BGN"
    )
    wallet = provisioner.initialize_first_wallet(User(id=uuid.uuid4()))
    assert (wallet.balance, wallet.currency) == (Decimal("5.00"), "BGN")


def test_first_wallet_refused_when_user_has_one():
    """A user who already owns a wallet cannot get a first one."""
    user = User(id=uuid.uuid4(), wallets=[Wallet()])

    with pytest.raises(WalletAlreadyExistsError):
        DefaultWalletProvisioner(SimpleIdGenerator()).initialize_first_wallet(user)
