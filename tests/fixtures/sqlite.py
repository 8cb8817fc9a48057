"""sqlite-specific fixtures"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from alembic import command
from sqlalchemy.engine import URL

from smart_wallet import config
from smart_wallet.adapters.db import orm
from smart_wallet.adapters.db.engine import make_engine
from smart_wallet.adapters.db.metadata import metadata

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


@pytest.fixture
def orm_mappers() -> Iterator[None]:
    """Map the domain classes for the duration of a test, then unmap them."""
    orm.start_mappers()
    try:
        yield
    finally:
        orm.clear_mappers()


@pytest.fixture
def sqlite_engine_memory() -> Iterator[Engine]:
    """In-memory SQLite engine for unit-style tests.

    Uses `make_engine()` so SQLite PRAGMAs are applied.
    Creates/drops tables with `metadata.create_all()` / `drop_all()`.

    Note: No Alembic migrations are run here.

    Yields:
        Engine: SQLAlchemy engine bound to an in-memory DB.
    """
    test_engine = make_engine("sqlite+pysqlite:///:memory:")
    metadata.create_all(test_engine)
    yield test_engine
    metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture
def sqlite_url_file(tmp_path: Path) -> str:
    """URL of a fresh, unmigrated SQLite file under the test's temp dir."""
    return str(URL.create("sqlite+pysqlite", database=str(tmp_path / "test.db")))


@pytest.fixture
def sqlite_engine_file(sqlite_url_file: str) -> Iterator[Engine]:
    """File-backed SQLite engine migrated via Alembic (per test).

    A temp *file* (not :memory:) is used so Alembic's schema changes persist
    across connections. Runs `alembic upgrade head`, then returns an Engine
    from `make_engine()` so PRAGMAs apply.

    Yields:
        Engine: SQLAlchemy engine pointing at a temp file DB.
    """
    command.upgrade(config.build_alembic_config(sqlite_url_file), "head")
    test_engine = make_engine(sqlite_url_file)
    try:
        yield test_engine
    finally:
        test_engine.dispose()
