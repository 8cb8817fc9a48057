"""User service: the account use-cases.

Every mutating operation runs inside the unit of work, saves the user once,
and commits. The user and their notification preference are written in the
unit of work's transaction, so an error at any point, the commit included,
leaves neither persisted.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from smart_wallet.domain.aggregates import User
from smart_wallet.domain.errors import UsernameAlreadyExistsError, UserNotFoundError

from .authentication import AuthenticationMetadata

if TYPE_CHECKING:
    from uuid import UUID

    from smart_wallet.interfaces.id_generator import IdGenerator
    from smart_wallet.interfaces.password_hasher import PasswordHasher
    from smart_wallet.interfaces.provisioning import (
        SubscriptionProvisioner,
        WalletProvisioner,
    )
    from smart_wallet.interfaces.unit_of_work import AbstractUnitOfWork

    from .dto import RegisterRequest, UserEditRequest

logger = logging.getLogger(__name__)


class UserService:  # pylint: disable=too-many-arguments
    """Orchestrates account registration and lifecycle changes.

    Args:
        uow: Unit of work providing the user repository and the
            notification preference store.
        password_hasher: Hashes plaintext passwords on registration.
        subscriptions: Creates the default subscription of a new user.
        wallets: Creates the first wallet of a new user.
        id_generator: Produces identifiers for new users.
    """

    def __init__(  # pylint: disable=too-many-positional-arguments
        self,
        uow: AbstractUnitOfWork,
        password_hasher: PasswordHasher,
        subscriptions: SubscriptionProvisioner,
        wallets: WalletProvisioner,
        id_generator: IdGenerator,
    ) -> None:
        self.uow = uow
        self.password_hasher = password_hasher
        self.subscriptions = subscriptions
        self.wallets = wallets
        self.id_generator = id_generator

    # --- Registration ---

    def register(self, request: RegisterRequest) -> User:
        """Register a new user with a default subscription and a first wallet.

        Raises:
            UsernameAlreadyExistsError: If the username is taken. Nothing is
                saved and no collaborator is called in that case.
        """
        with self.uow:
            if self.uow.users.find_by_username(request.username) is not None:
                raise UsernameAlreadyExistsError(request.username)

            user = User.register(
                user_id=self.id_generator.new_id(),
                username=request.username,
                password_hash=self.password_hasher.hash(request.password),
                country=request.country,
            )
            user = self.uow.users.save(user)

            user.add_subscription(self.subscriptions.create_default_subscription(user))
            user.add_wallet(self.wallets.initialize_first_wallet(user))
            self.uow.notifications.save_notification_preference(user.id, False, None)

            self.uow.commit()

        logger.info("Registered user %s with id %s", request.username, user.id)
        return user

    # --- Lifecycle ---

    def switch_role(self, user_id: UUID) -> None:
        """Toggle the user's role between USER and ADMIN."""
        with self.uow:
            user = self._get_or_raise(user_id)
            user.switch_role()
            self.uow.users.save(user)
            self.uow.commit()
        logger.info("User %s role switched to %s", user_id, user.role.name)

    def switch_status(self, user_id: UUID) -> None:
        """Flip the user's active flag."""
        with self.uow:
            user = self._get_or_raise(user_id)
            user.switch_status()
            self.uow.users.save(user)
            self.uow.commit()
        logger.info(
            "User %s is now %s", user_id, "active" if user.is_active else "inactive"
        )

    def edit_user_details(self, user_id: UUID, request: UserEditRequest) -> None:
        """Overwrite the user's profile and record their notification preference.

        Notifications are enabled only when a non-empty email is supplied; an
        empty or missing email disables them and passes no address.
        """
        with self.uow:
            user = self._get_or_raise(user_id)
            user.update_profile(
                first_name=request.first_name,
                last_name=request.last_name,
                email=request.email,
                profile_picture=request.profile_picture,
            )

            notify = request.email is not None and request.email != ""
            self.uow.notifications.save_notification_preference(
                user_id, notify, request.email if notify else None
            )

            self.uow.users.save(user)
            self.uow.commit()
        logger.info("User %s edited their profile", user_id)

    # --- Queries ---

    def load_user_by_username(self, username: str) -> AuthenticationMetadata:
        """Build the authentication view of a user.

        Raises:
            UserNotFoundError: If no user has that username.
        """
        with self.uow:
            user = self.uow.users.find_by_username(username)
        if user is None:
            logger.debug("Authentication lookup failed for %s", username)
            raise UserNotFoundError(username)

        return AuthenticationMetadata(
            user_id=user.id,
            username=username,
            password=user.password,
            is_active=user.is_active,
            role=user.role,
        )

    def get_all_users(self) -> list[User]:
        """Return every registered user."""
        with self.uow:
            return self.uow.users.list_all()

    def get_by_id(self, user_id: UUID) -> User:
        """Return the user with the given id.

        Raises:
            UserNotFoundError: If no user has that id.
        """
        with self.uow:
            return self._get_or_raise(user_id)

    def _get_or_raise(self, user_id: UUID) -> User:
        user = self.uow.users.get(user_id)
        if user is None:
            logger.debug("User %s not found", user_id)
            raise UserNotFoundError(user_id)
        return user
