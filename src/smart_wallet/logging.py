"""Logging setup for the SMART WALLET CLI.

Console output goes through a Rich handler on stderr. An optional in-memory
"flight recorder" keeps recent records at DEBUG granularity and writes them to
a log file once something at WARNING or above happens.
"""

from __future__ import annotations

import logging
from logging.handlers import MemoryHandler
from pathlib import Path

import alembic
import passlib
import sqlalchemy
from platformdirs import user_log_dir
from rich.console import Console
from rich.logging import RichHandler

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "smart_wallet"
APP_NAME = "smart-wallet"

FILE_FORMAT = "[%(asctime)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"


class ThirdPartyPrefixFilter(logging.Filter):
    """Set `record.prefix` to "[library]" for records from outside the project."""

    def filter(self, record: logging.LogRecord) -> bool:
        top = record.name.split(".")[0]
        record.prefix = "" if top == PROJECT_PREFIX else f"[{top}]"
        return True


def default_log_path() -> Path:
    """Flight recorder file under the per-user log directory."""
    log_dir = user_log_dir(APP_NAME, appauthor=False, ensure_exists=True)
    return Path(log_dir) / "latest.log"


def config_console_handler(
    level: int = logging.WARNING, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    Debug mode lowers the level to DEBUG and shows logger names and source
    locations instead of the library prefix.
    """
    console = Console(color_system="auto" if color else None, stderr=True)
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path, capacity: int = 2000, flush_on_close: bool = False
) -> MemoryHandler:
    """Build a memory buffer that dumps to `path` on WARNING (or on close).

    The file is only created on the first flush.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=logging.WARNING,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def configure_logging(  # pylint: disable=too-many-arguments
    *,
    level: int,
    debug_mode: bool = False,
    color: bool = True,
    log_path: Path | None = None,
    flight_recorder_capacity: int | None = None,
    flush_on_close: bool = False,
    logger_levels: dict[str, int] | None = None,
) -> list[logging.Handler]:
    """Install the console handler (and flight recorder) on the root logger.

    Args:
        level: Console level.
        debug_mode: See `config_console_handler`.
        color: Colorize console output.
        log_path: Flight recorder file; the recorder is off when None.
        flight_recorder_capacity: Records kept in memory by the recorder.
        flush_on_close: Dump the recorder on shutdown even without a warning.
        logger_levels: Minimum levels for named loggers, e.g. ``sqlalchemy``.

    Returns:
        The installed handlers.
    """
    handlers: list[logging.Handler] = [
        config_console_handler(level=level, debug_mode=debug_mode, color=color)
    ]
    if log_path is not None:
        handlers.append(
            config_flight_recorder(
                log_path,
                capacity=flight_recorder_capacity or 2000,
                flush_on_close=flush_on_close,
            )
        )

    # root passes everything; the handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in (logger_levels or {}).items():
        logging.getLogger(name).setLevel(lvl)

    logger = logging.getLogger(PROJECT_PREFIX)
    logger.debug(
        "Logging configured: console=%s, flight recorder=%s",
        logging.getLevelName(handlers[0].level),
        log_path or "off",
    )
    logger.debug(
        "Libraries: sqlalchemy %s, alembic %s, passlib %s",
        sqlalchemy.__version__,
        alembic.__version__,
        passlib.__version__,
    )
    return handlers
