"""Domain-layer error definitions."""

from uuid import UUID

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidTransitionError(DomainError):
    """Raised when an aggregate is in an invalid state for the attempted action."""


# ============================================================================
#                           User related errors
# ============================================================================


class UsernameAlreadyExistsError(DomainError):
    """Raised when registering a username that is already taken."""

    def __init__(self, username: str) -> None:
        super().__init__(f"Username '{username}' already exists.")
        self.username = username


class UserNotFoundError(DomainError):
    """Raised when a user cannot be resolved by id or username."""

    def __init__(self, key: UUID | str) -> None:
        super().__init__(f"User with identifier '{key}' does not exist.")
        self.key = key


# ============================================================================
#                           Wallet related errors
# ============================================================================


class WalletAlreadyExistsError(InvalidTransitionError):
    """Raised when a first wallet is requested for a user that already owns one."""

    def __init__(self, user_id: UUID | None) -> None:
        super().__init__(f"User {user_id} already has a wallet.")
        self.user_id = user_id
