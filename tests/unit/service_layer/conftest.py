"""Pytest fixtures for user service unit tests."""

from __future__ import annotations

import uuid
from types import SimpleNamespace

import pytest

from smart_wallet.service_layer.user_service import UserService

from .fakes import (
    FakePasswordHasher,
    FakeSubscriptionProvisioner,
    FakeUoW,
    FakeWalletProvisioner,
    FixedIdGenerator,
)

# pylint: disable=redefined-outer-name


@pytest.fixture
def fakes() -> SimpleNamespace:
    """Fresh set of fake collaborators per test."""
    uow = FakeUoW()
    return SimpleNamespace(
        uow=uow,
        notifications=uow.notifications,
        password_hasher=FakePasswordHasher(),
        subscriptions=FakeSubscriptionProvisioner(),
        wallets=FakeWalletProvisioner(),
        id_generator=FixedIdGenerator(uuid.uuid4()),
    )


@pytest.fixture
def user_service(fakes: SimpleNamespace) -> UserService:
    """A user service wired to the fakes."""
    return UserService(
        uow=fakes.uow,
        password_hasher=fakes.password_hasher,
        subscriptions=fakes.subscriptions,
        wallets=fakes.wallets,
        id_generator=fakes.id_generator,
    )
