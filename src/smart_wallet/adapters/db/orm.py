"""Imperative ORM mappings for the User aggregate.

The domain classes stay plain dataclasses; this module maps them onto the
tables in `schema` at runtime. Call `start_mappers()` before using an ORM
session; calling it more than once is harmless.
"""

import logging

from sqlalchemy import inspect
from sqlalchemy.orm import registry, relationship

from smart_wallet.domain.aggregates import User
from smart_wallet.domain.entities import Subscription, Wallet

from .schema import subscriptions, users, wallets

logger = logging.getLogger(__name__)

mapper_registry = registry()


def is_mapped() -> bool:
    """Return True if the domain classes are already mapped."""
    return inspect(User, raiseerr=False) is not None


def start_mappers() -> None:
    """Map User, Subscription, and Wallet onto their tables."""
    if is_mapped():
        return

    logger.debug("Starting ORM mappers")
    subscription_mapper = mapper_registry.map_imperatively(Subscription, subscriptions)
    wallet_mapper = mapper_registry.map_imperatively(Wallet, wallets)
    mapper_registry.map_imperatively(
        User,
        users,
        properties={
            # owned collections load eagerly so users stay usable after the
            # session closes
            "subscriptions": relationship(
                subscription_mapper,
                cascade="all, delete-orphan",
                lazy="selectin",
            ),
            "wallets": relationship(
                wallet_mapper,
                cascade="all, delete-orphan",
                lazy="selectin",
            ),
        },
    )


def clear_mappers() -> None:
    """Undo `start_mappers()` (test helper)."""
    mapper_registry.dispose()
