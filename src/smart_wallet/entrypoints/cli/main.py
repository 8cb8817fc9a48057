"""SMART WALLET CLI entry point.

Defines the top-level ``smart-wallet`` command (via Click-Extra), configures
logging, and registers the subcommand groups:

- ``smart-wallet db``: forward-only database management (upgrade/current/heads/status).
- ``smart-wallet users``: account administration.

Examples
    $ smart-wallet --version
    $ smart-wallet db upgrade
    $ smart-wallet users register alice --country GERMANY
"""

import logging
from pathlib import Path

import click
import click_extra as clickx

from smart_wallet import __version__
from smart_wallet.logging import configure_logging, default_log_path

from .db import db as db_group
from .helpers.log_level_parser import parse_log_level
from .users import users as users_group

logger = logging.getLogger(__name__)


HELP = """SMART WALLET command-line interface.

    Administer the accounts of the SMART WALLET application: register users,
    switch their role and status, edit their profiles, and manage the database
    schema.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Increase the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Decrease the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=None,
    envvar="SMART_WALLET_LOG_PATH",
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="SMART_WALLET_FLIGHT_RECORDER_CAPACITY",
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity and write them to "
        "--log-path when a WARNING/ERROR occurs (or on exit with --force-flush)."
    ),
    default=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Flush the flight recorder buffer to --log-path on program exit.",
    default=False,
    envvar="SMART_WALLET_FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L sqlalchemy=INFO) or via SMART_WALLET_LOGGER_LEVELS."
    ),
    envvar="SMART_WALLET_LOGGER_LEVELS",
    default=("sqlalchemy=WARNING", "alembic=WARNING"),
    show_default=True,
)
@clickx.pass_context
def smart_wallet(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path | None,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """SMART WALLET command-line interface."""

    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    if flight_recorder and log_path is None:
        log_path = default_log_path()

    configure_logging(
        level=level,
        debug_mode=debug,
        color=ctx.color is not False,
        log_path=log_path if flight_recorder else None,
        flight_recorder_capacity=flight_recorder_capacity,
        flush_on_close=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    logger.info("SMART WALLET %s", __version__)

    ctx.call_on_close(logging.shutdown)


smart_wallet.add_command(db_group)
smart_wallet.add_command(users_group)
