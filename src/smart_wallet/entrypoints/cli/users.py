"""SMART WALLET users CLI.

Account administration commands on top of the user service:
``register``, ``list``, ``show``, ``authorities``, ``switch-role``,
``switch-status``, and ``edit``.

Domain failures (duplicate username, unknown user) exit with status 1 and a
one-line message.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import replace
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from smart_wallet.bootstrap import bootstrap
from smart_wallet.domain.errors import DomainError
from smart_wallet.domain.value_objects import Country
from smart_wallet.service_layer.dto import RegisterRequest
from smart_wallet.service_layer.mapper import map_user_to_user_edit_request

from .db import get_engine
from .helpers import success

if TYPE_CHECKING:
    from uuid import UUID

    from smart_wallet.domain.aggregates import User
    from smart_wallet.service_layer.user_service import UserService

logger = logging.getLogger(__name__)


def _user_service() -> UserService:
    return bootstrap(get_engine()).user_service


@contextmanager
def _domain_errors() -> Iterator[None]:
    try:
        yield
    except DomainError as e:
        logger.debug("Domain error: %s", e)
        raise click.ClickException(str(e)) from e


def _describe(user: User) -> str:
    status = "active" if user.is_active else "inactive"
    country = user.country.name if user.country else "-"
    return f"{user.id}\t{user.username}\t{user.role.name}\t{status}\t{country}"


@click.group(cls=clickx.ExtraGroup)
def users() -> None:
    """User account commands."""


@users.command()
@click.argument("username")
@click.option(
    "--country",
    type=click.Choice([c.name for c in Country], case_sensitive=False),
    required=True,
    help="Country the user registers from.",
)
@click.option(
    "--password",
    prompt=True,
    hide_input=True,
    confirmation_prompt=True,
    help="Plaintext password (prompted when omitted).",
)
def register(username: str, country: str, password: str) -> None:
    """Register a new user with a default subscription and first wallet."""
    request = RegisterRequest(
        username=username, password=password, country=Country[country.upper()]
    )
    with _domain_errors():
        user = _user_service().register(request)
    click.echo(str(user.id))
    success(f"Registered user {username}.")


@users.command(name="list")
def list_users() -> None:
    """List every user (id, username, role, status, country)."""
    for user in _user_service().get_all_users():
        click.echo(_describe(user))


@users.command()
@click.argument("user_id", type=click.UUID)
def show(user_id: UUID) -> None:
    """Show one user with their profile, subscriptions, and wallets."""
    with _domain_errors():
        user = _user_service().get_by_id(user_id)
    click.echo(_describe(user))
    edit_form = map_user_to_user_edit_request(user)
    click.echo(f"  first name      : {edit_form.first_name or ''}")
    click.echo(f"  last name       : {edit_form.last_name or ''}")
    click.echo(f"  email           : {edit_form.email or ''}")
    click.echo(f"  profile picture : {edit_form.profile_picture or ''}")
    for subscription in user.subscriptions:
        click.echo(
            f"  subscription    : {subscription.type.name} "
            f"{subscription.period.name} {subscription.status.name}"
        )
    for wallet in user.wallets:
        click.echo(
            f"  wallet          : {wallet.id} {wallet.balance} {wallet.currency} "
            f"{wallet.status.name}"
        )


@users.command()
@click.argument("username")
def authorities(username: str) -> None:
    """Show the authorities a username authenticates with."""
    with _domain_errors():
        metadata = _user_service().load_user_by_username(username)
    for authority in sorted(metadata.authorities):
        click.echo(authority)


@users.command(name="switch-role")
@click.argument("user_id", type=click.UUID)
def switch_role(user_id: UUID) -> None:
    """Toggle a user's role between USER and ADMIN."""
    with _domain_errors():
        _user_service().switch_role(user_id)
    success(f"Switched role of user {user_id}.")


@users.command(name="switch-status")
@click.argument("user_id", type=click.UUID)
def switch_status(user_id: UUID) -> None:
    """Activate an inactive user or deactivate an active one."""
    with _domain_errors():
        _user_service().switch_status(user_id)
    success(f"Switched status of user {user_id}.")


@users.command()
@click.argument("user_id", type=click.UUID)
@click.option("--first-name", default=None, help="New first name.")
@click.option("--last-name", default=None, help="New last name.")
@click.option(
    "--email",
    default=None,
    help="New email; notifications are enabled only for a non-empty email.",
)
@click.option("--profile-picture", default=None, help="New profile picture URL.")
def edit(
    user_id: UUID,
    first_name: str | None,
    last_name: str | None,
    email: str | None,
    profile_picture: str | None,
) -> None:
    """Edit a user's profile; options left out keep their current value."""
    service = _user_service()
    with _domain_errors():
        current = map_user_to_user_edit_request(service.get_by_id(user_id))
        changes = {
            name: value
            for name, value in {
                "first_name": first_name,
                "last_name": last_name,
                "email": email,
                "profile_picture": profile_picture,
            }.items()
            if value is not None
        }
        service.edit_user_details(user_id, replace(current, **changes))
    success(f"Updated profile of user {user_id}.")
