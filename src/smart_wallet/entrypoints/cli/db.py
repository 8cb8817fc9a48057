"""SMART WALLET DB CLI: forward-only Alembic wrappers.

Destructive operations (``downgrade``, ``stamp``) are intentionally omitted.
Human-oriented notices go to **stderr**, Alembic output to **stdout**.
Schema-changing actions prompt for confirmation unless ``--force`` is given.

Requirements
- ``SMART_WALLET_DB_URL`` must be set for commands that touch the database.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from alembic import command
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import text
from sqlalchemy.exc import ArgumentError, OperationalError

from smart_wallet import config
from smart_wallet.adapters.db.engine import make_engine

from .helpers import sanitize_url, success, warn

if TYPE_CHECKING:
    from alembic.config import Config
    from sqlalchemy.engine import Engine

MISSING_DB_URL_MSG = (
    "SMART_WALLET_DB_URL is not set.\n\n"
    "Set it before running this command, e.g.:\n"
    "  export SMART_WALLET_DB_URL='sqlite:///smart_wallet.db'\n"
    "  or in PowerShell:\n"
    "  $env:SMART_WALLET_DB_URL='sqlite:///smart_wallet.db'"
)

INVALID_URL_FORMAT_MSG = (
    "The value of SMART_WALLET_DB_URL is not a valid SQLAlchemy database URL."
)

CANNOT_CONNECT_MSG = (
    "SMART_WALLET_DB_URL is set, but the database is not reachable.\n"
    "Please ensure the database is running and the URL is correct."
)

UPGRADE_SCHEMA_WARNING = (
    "This will upgrade the database schema to the latest version.\n"
    "Please ensure you have a backup before proceeding."
)

UPGRADE_SCHEMA_INSTRUCTIONS = "Run 'smart-wallet db upgrade' to update the schema."


def _connect(url: str) -> Engine:
    engine = make_engine(url)
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except OperationalError as e:
        engine.dispose()
        raise click.ClickException(CANNOT_CONNECT_MSG) from e
    return engine


def get_engine() -> Engine:
    """Return a checked engine for the configured database.

    The engine is disposed when the current Click context closes, so one
    command invocation uses one connection pool.

    Raises:
        click.ClickException: If the URL is missing, malformed, or unreachable.
    """
    try:
        url = config.get_db_url()
    except config.DatabaseUrlNotSetError as e:
        raise click.ClickException(MISSING_DB_URL_MSG) from e
    try:
        engine = _connect(url)
    except ArgumentError as e:
        raise click.ClickException(INVALID_URL_FORMAT_MSG) from e
    click.get_current_context().call_on_close(engine.dispose)
    return engine


def get_url() -> str:
    """Return the configured database URL (password included) once it is reachable."""
    return get_engine().url.render_as_string(hide_password=False)


@click.group(cls=clickx.ExtraGroup)
def db() -> None:
    """Database management commands."""


@db.command()
@click.option(
    "--verbose", "-v", "verbose", is_flag=True, help="Show alembic's more verbose output."
)
def current(verbose: bool) -> None:
    """Show current DB revision."""
    cfg = config.build_alembic_config(db_url=get_url(), stdout=sys.stdout)
    command.current(cfg, verbose=verbose)


@db.command()
@click.option(
    "--verbose", "-v", "verbose", is_flag=True, help="Show alembic's more verbose output."
)
def heads(verbose: bool) -> None:
    """Show available head revisions."""
    cfg = config.build_alembic_config(stdout=sys.stdout)
    command.heads(cfg, verbose=verbose)


@db.command()
@click.option("--sql", is_flag=True, help="Generate SQL without executing.")
@click.option("--force", is_flag=True, help="Upgrade without confirmation.")
def upgrade(sql: bool, force: bool) -> None:
    """Upgrade the database to the head revision."""
    url = get_url()
    cfg = config.build_alembic_config(db_url=url, stdout=sys.stdout)
    if not force and not sql:
        warn(UPGRADE_SCHEMA_WARNING)
        click.secho(f"db: {click.style(sanitize_url(url), underline=True)}")
        click.confirm("Are you sure you want to proceed?", abort=True)
    command.upgrade(cfg, revision="head", sql=sql)
    success("Upgrade complete!")


class MigrationStatus(Enum):
    """Describes the migration status of the database schema."""

    UP_TO_DATE = "up to date"
    OUT_OF_DATE = "out of date"
    UNINITIALIZED = "uninitialized"


def _get_current_revision(engine: Engine) -> str | None:
    with engine.connect() as conn:
        return MigrationContext.configure(conn).get_current_revision()


def _get_head_revision(cfg: Config) -> str | None:
    heads_ = ScriptDirectory.from_config(cfg).get_heads()
    return heads_[0] if heads_ else None


@db.command()
def status() -> None:
    """Show database connection and schema status."""
    engine = get_engine()
    url = engine.url.render_as_string(hide_password=False)
    success("Database reachable")
    click.echo(f"Backend : {engine.dialect.name}")
    click.echo(f"URL     : {sanitize_url(url)}")

    rev = _get_current_revision(engine)
    head = _get_head_revision(config.build_alembic_config(db_url=url))

    if rev is None:
        migration_status = MigrationStatus.UNINITIALIZED
    elif rev == head:
        migration_status = MigrationStatus.UP_TO_DATE
    else:
        migration_status = MigrationStatus.OUT_OF_DATE

    message = f"{rev} ({migration_status.value})" if rev else migration_status.value
    click.echo(f"Schema  : {message}")
    if migration_status is not MigrationStatus.UP_TO_DATE:
        warn(UPGRADE_SCHEMA_INSTRUCTIONS)
