"""Integration tests for the SQLAlchemy notification preference store.

The store runs on the unit of work's session, so these tests go through
`SqlAlchemyUnitOfWork` and check that preferences follow its commit and rollback.
"""

import uuid

import pytest

from smart_wallet.adapters.notifications import SqlAlchemyNotificationPreferences
from smart_wallet.adapters.unit_of_work import SqlAlchemyUnitOfWork
from smart_wallet.interfaces.notifications import NotificationPreference

# pylint: disable=redefined-outer-name
# pylint: disable=unused-argument


@pytest.fixture
def uow(sqlite_engine_memory, orm_mappers):
    """A unit of work on an in-memory database."""
    return SqlAlchemyUnitOfWork(sqlite_engine_memory)


def _saved(uow, user_id):
    with uow:
        return uow.notifications.get_notification_preference(user_id)


def test_uow_provides_sql_store(uow):
    """Inside the block the unit of work exposes the SQL store."""
    with uow:
        assert isinstance(uow.notifications, SqlAlchemyNotificationPreferences)


def test_first_save_inserts(uow):
    """The first save for a user creates the row."""
    user_id = uuid.uuid4()
    with uow:
        uow.notifications.save_notification_preference(user_id, False, None)
        uow.commit()

    assert _saved(uow, user_id) == NotificationPreference(user_id, False, None)


def test_second_save_updates(uow):
    """A later save replaces the stored preference."""
    user_id = uuid.uuid4()
    with uow:
        uow.notifications.save_notification_preference(user_id, False, None)
        uow.commit()
    with uow:
        uow.notifications.save_notification_preference(
            user_id, True, "sieber.test@gmail.com"
        )
        uow.commit()

    assert _saved(uow, user_id) == NotificationPreference(
        user_id, True, "sieber.test@gmail.com"
    )


def test_uncommitted_save_is_rolled_back(uow):
    """Leaving the block without commit discards the preference."""
    user_id = uuid.uuid4()
    with uow:
        uow.notifications.save_notification_preference(user_id, True, "a@b.c")

    assert _saved(uow, user_id) is None


def test_unknown_user(uow):
    """Unknown users have no stored preference."""
    assert _saved(uow, uuid.uuid4()) is None
