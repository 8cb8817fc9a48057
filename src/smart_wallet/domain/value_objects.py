"""Module including value objects used across the domain layer."""

from enum import Enum


class UserRole(Enum):
    """Enumeration of the two roles a user can hold."""

    USER = "user"
    ADMIN = "admin"

    def toggled(self) -> "UserRole":
        """Return the other role (USER <-> ADMIN)."""
        return UserRole.ADMIN if self is UserRole.USER else UserRole.USER


class Country(Enum):
    """Enumeration of countries a user can register from."""

    BULGARIA = "bulgaria"
    GERMANY = "germany"
    FRANCE = "france"
    SWITZERLAND = "switzerland"


class SubscriptionStatus(Enum):
    """Enumeration of subscription states"""

    ACTIVE = "active"
    COMPLETED = "completed"
    TERMINATED = "terminated"


class SubscriptionPeriod(Enum):
    """Enumeration of subscription billing periods"""

    MONTHLY = "monthly"
    YEARLY = "yearly"


class SubscriptionType(Enum):
    """Enumeration of subscription plans"""

    DEFAULT = "default"
    PREMIUM = "premium"
    ULTIMATE = "ultimate"


class WalletStatus(Enum):
    """Enumeration of wallet states"""

    ACTIVE = "active"
    INACTIVE = "inactive"
