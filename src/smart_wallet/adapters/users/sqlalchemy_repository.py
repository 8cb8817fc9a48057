"""SQLAlchemy ORM implementation of the UserRepository interface."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from smart_wallet.domain.aggregates import User
from smart_wallet.interfaces.user_repository import UserRepository

if TYPE_CHECKING:
    from uuid import UUID

    from sqlalchemy.orm import Session


class SqlAlchemyUserRepository(UserRepository):
    """User repository bound to an ORM session.

    Requires `smart_wallet.adapters.db.orm.start_mappers()` to have run.
    Nothing is written until the owning unit of work commits.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: UUID) -> User | None:
        return self.session.get(User, user_id)

    def find_by_username(self, username: str) -> User | None:
        stmt = select(User).filter_by(username=username)
        return self.session.scalars(stmt).one_or_none()

    def list_all(self) -> list[User]:
        stmt = select(User).order_by(User.created_on)  # type: ignore[arg-type]
        return list(self.session.scalars(stmt))

    def save(self, user: User) -> User:
        self.session.add(user)
        return user
