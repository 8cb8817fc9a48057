"""Bootstrap the user service with its adapters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from smart_wallet import config
from smart_wallet.adapters.db.engine import make_engine
from smart_wallet.adapters.id_generators import UUIDv4Generator
from smart_wallet.adapters.password_hasher import PasslibPasswordHasher
from smart_wallet.adapters.provisioning import (
    DefaultSubscriptionProvisioner,
    DefaultWalletProvisioner,
)
from smart_wallet.adapters.unit_of_work import SqlAlchemyUnitOfWork
from smart_wallet.service_layer.user_service import UserService

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from smart_wallet.interfaces.id_generator import IdGenerator
    from smart_wallet.interfaces.password_hasher import PasswordHasher
    from smart_wallet.interfaces.unit_of_work import AbstractUnitOfWork


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    user_service: UserService
    uow: AbstractUnitOfWork


def build_user_service(
    uow: AbstractUnitOfWork,
    *,
    password_hasher: PasswordHasher | None = None,
    id_generator: IdGenerator | None = None,
) -> UserService:
    """Build a user service with injected dependencies."""
    id_generator = id_generator or UUIDv4Generator()
    return UserService(
        uow=uow,
        password_hasher=password_hasher or PasslibPasswordHasher(),
        subscriptions=DefaultSubscriptionProvisioner(id_generator),
        wallets=DefaultWalletProvisioner(id_generator),
        id_generator=id_generator,
    )


def bootstrap(engine: Engine | None = None) -> AppContainer:
    """Bootstrap the user service against the configured database."""
    engine = engine or make_engine(config.get_db_url())
    uow = SqlAlchemyUnitOfWork(engine)
    return AppContainer(user_service=build_user_service(uow), uow=uow)
