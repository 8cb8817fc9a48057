"""SQLAlchemy-backed Unit of Work for SMART WALLET.

Provides a context-managed UnitOfWork using a SQLAlchemy ORM Session
with the SqlAlchemyUserRepository and SqlAlchemyNotificationPreferences
sharing its transaction.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.orm import Session, sessionmaker

from smart_wallet.adapters.db.orm import start_mappers
from smart_wallet.adapters.notifications import SqlAlchemyNotificationPreferences
from smart_wallet.adapters.users import SqlAlchemyUserRepository
from smart_wallet.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy-backed Unit of Work.

    Objects stay loaded after commit (``expire_on_commit=False``) and are
    detached before the closing rollback, so the service layer can return
    them once the session has closed.
    """

    def __init__(self, engine: Engine):
        start_mappers()
        self.engine = engine
        self.session_factory = sessionmaker(bind=engine, expire_on_commit=False)
        self.session: Session

    def __enter__(self):
        self.session = self.session_factory()
        self.users = SqlAlchemyUserRepository(self.session)
        self.notifications = SqlAlchemyNotificationPreferences(self.session)
        return super().__enter__()

    def __exit__(self, *args):
        # detach first so the rollback does not expire objects handed to callers
        self.session.expunge_all()
        super().__exit__(*args)
        self.session.close()

    def commit(self):
        self.session.commit()

    def rollback(self):
        self.session.rollback()
