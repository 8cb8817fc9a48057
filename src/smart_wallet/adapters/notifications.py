"""Notification preference stores."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy import select, update

from smart_wallet.interfaces.notifications import (
    NotificationPreference,
    NotificationPreferences,
)

from .db.schema import notification_preferences

if TYPE_CHECKING:
    from uuid import UUID

    from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class InMemoryNotificationPreferences(NotificationPreferences):
    """Dict-backed notification preference store."""

    def __init__(self) -> None:
        self._preferences: dict[UUID, NotificationPreference] = {}

    def save_notification_preference(
        self, user_id: UUID, enabled: bool, contact_info: str | None
    ) -> None:
        self._preferences[user_id] = NotificationPreference(
            user_id=user_id, enabled=enabled, contact_info=contact_info
        )

    def get_notification_preference(
        self, user_id: UUID
    ) -> NotificationPreference | None:
        return self._preferences.get(user_id)


class SqlAlchemyNotificationPreferences(NotificationPreferences):
    """Notification preference store backed by the `notification_preferences` table.

    Statements run on the unit of work's session, so a preference is committed
    or rolled back together with the user it belongs to.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def save_notification_preference(
        self, user_id: UUID, enabled: bool, contact_info: str | None
    ) -> None:
        values = {
            "enabled": enabled,
            "contact_info": contact_info,
            "updated_on": datetime.now(timezone.utc),
        }
        result = self.session.execute(
            update(notification_preferences)
            .where(notification_preferences.c.user_id == user_id)
            .values(**values)
        )
        if result.rowcount == 0:
            self.session.execute(
                notification_preferences.insert().values(user_id=user_id, **values)
            )
        logger.debug(
            "Saved notification preference for user %s (enabled=%s)", user_id, enabled
        )

    def get_notification_preference(
        self, user_id: UUID
    ) -> NotificationPreference | None:
        stmt = select(
            notification_preferences.c.user_id,
            notification_preferences.c.enabled,
            notification_preferences.c.contact_info,
        ).where(notification_preferences.c.user_id == user_id)
        row = self.session.execute(stmt).one_or_none()
        if row is None:
            return None
        return NotificationPreference(
            user_id=row.user_id, enabled=row.enabled, contact_info=row.contact_info
        )
