"""Mapping between persisted users and transfer objects."""

from smart_wallet.domain.aggregates import User

from .dto import UserEditRequest


def map_user_to_user_edit_request(user: User) -> UserEditRequest:
    """Prefill a profile-edit request from the user's current profile."""
    return UserEditRequest(
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        profile_picture=user.profile_picture,
    )
