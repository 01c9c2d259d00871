from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

import pytest
from dotenv import load_dotenv
from sqlalchemy import Engine
from sqlalchemy.pool import StaticPool

# Load dotenv files early so fixtures can read overrides via os.getenv
TEST_ROOT = Path(__file__).resolve().parent
load_dotenv(TEST_ROOT / ".env", override=False)

from spanner_orm_tutorial.core.config import Settings
from spanner_orm_tutorial.core.database import create_all, create_engine, create_sessionmaker


@pytest.fixture
def make_settings():
    """Factory building Settings without reading the developer's .env file."""

    def _make(**overrides) -> Settings:
        return Settings(_env_file=None, **overrides)

    return _make


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    """In-memory SQLite engine with the catalogue tables created from ORM metadata.

    SQLite supports stored generated columns, so ``singers.full_name`` behaves
    as it does on Spanner.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session_factory(sqlite_engine: Engine):
    return create_sessionmaker(sqlite_engine)


@pytest.fixture
def clean_emulator_env(monkeypatch: pytest.MonkeyPatch):
    """Make sure no emulator address leaks in from, or out to, the outer environment."""
    # setenv first so the variable is restored (or removed) after the test
    monkeypatch.setenv("SPANNER_EMULATOR_HOST", "")
    monkeypatch.delenv("SPANNER_EMULATOR_HOST")
    return os.environ
