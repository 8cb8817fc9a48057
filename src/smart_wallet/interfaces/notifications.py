"""Interface for notification preferences."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from uuid import UUID


@dataclass(frozen=True)
class NotificationPreference:
    """Whether a user opted into notifications and at which address."""

    user_id: UUID
    enabled: bool
    contact_info: str | None


class NotificationPreferences(abc.ABC):
    """Contract for recording per-user notification preferences."""

    @abc.abstractmethod
    def save_notification_preference(
        self, user_id: UUID, enabled: bool, contact_info: str | None
    ) -> None:
        """Create or replace the notification preference of a user.

        Args:
            user_id: The user the preference belongs to.
            enabled: Whether the user opted into notifications.
            contact_info: Address notifications go to; None when not enabled.
        """

    @abc.abstractmethod
    def get_notification_preference(
        self, user_id: UUID
    ) -> NotificationPreference | None:
        """Return the stored preference of a user, if any."""
