"""Unit tests for smart_wallet.logging."""

import logging

import pytest

from smart_wallet.logging import (
    ThirdPartyPrefixFilter,
    config_console_handler,
    configure_logging,
)

# pylint: disable=magic-value-comparison


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Put the root logger back the way the test found it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.parametrize(
    ("name", "prefix"),
    [
        ("sqlalchemy.engine.Engine", "[sqlalchemy]"),
        ("smart_wallet.service_layer.user_service", ""),
        ("smart_wallet", ""),
        ("smart_wallet_plugin", "[smart_wallet_plugin]"),
    ],
)
def test_prefix_filter(name, prefix):
    """Only records from outside the project get a library prefix."""
    record = logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)
    assert ThirdPartyPrefixFilter().filter(record) is True
    assert record.prefix == prefix


def test_debug_mode_lowers_console_level():
    """Debug mode overrides the requested level."""
    assert config_console_handler(level=logging.ERROR, debug_mode=True).level == logging.DEBUG
    assert config_console_handler(level=logging.ERROR).level == logging.ERROR


def test_flight_recorder_writes_on_warning(tmp_path):
    """Buffered DEBUG records reach the file once a warning is logged."""
    log_path = tmp_path / "latest.log"
    configure_logging(level=logging.CRITICAL, log_path=log_path)
    logger = logging.getLogger("smart_wallet.test")

    logger.debug("buffered detail")
    assert not log_path.exists()

    logger.warning("something odd")
    text = log_path.read_text(encoding="utf-8")
    assert "buffered detail" in text
    assert "something odd" in text


def test_without_log_path_only_console(tmp_path):
    """No flight recorder is installed without a log path."""
    handlers = configure_logging(
        level=logging.INFO, logger_levels={"sqlalchemy": logging.ERROR}
    )
    assert len(handlers) == 1
    assert logging.getLogger("sqlalchemy").level == logging.ERROR
    assert not list(tmp_path.iterdir())
