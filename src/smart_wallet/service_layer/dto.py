"""Transfer objects accepted by the user service."""

from dataclasses import dataclass

from smart_wallet.domain.value_objects import Country


@dataclass(frozen=True)
class RegisterRequest:
    """Input for registering a new account."""

    username: str
    password: str
    country: Country


@dataclass(frozen=True)
class UserEditRequest:
    """Input for editing a profile.

    ``None`` means the field was not supplied; an empty string is a supplied,
    empty value. Both are written to the user verbatim.
    """

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    profile_picture: str | None = None
