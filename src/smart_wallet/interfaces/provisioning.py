"""Interfaces for provisioning the resources a new user owns."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from smart_wallet.domain.aggregates import User
    from smart_wallet.domain.entities import Subscription, Wallet

# pylint: disable=too-few-public-methods


class SubscriptionProvisioner(abc.ABC):
    """Contract for creating a user's default subscription."""

    @abc.abstractmethod
    def create_default_subscription(self, user: User) -> Subscription:
        """Create the default subscription for a newly registered user."""


class WalletProvisioner(abc.ABC):
    """Contract for creating a user's first wallet."""

    @abc.abstractmethod
    def initialize_first_wallet(self, user: User) -> Wallet:
        """Create the first wallet for a newly registered user.

        Raises:
            WalletAlreadyExistsError: If the user already owns a wallet.
        """
