"""
Database utility functions for engine and session management.

Functions:
- create_engine: Creates a SQLAlchemy engine, by default for the Spanner dialect
- create_sessionmaker: Creates a SQLModel session factory with safe defaults
- create_all: Creates all tables from ORM metadata (for tests on SQLite only)
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import Engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import Session
from sqlmodel import create_engine as _sqlmodel_create_engine

from .base import Base

# Importing the entities registers their tables on Base.metadata
from . import entities  # noqa: F401


def create_engine(db_url: str, **kwargs: Any) -> Engine:
    """Create a SQLAlchemy engine.

    For Cloud Spanner the URL has the form
    ``spanner+spanner:///projects/<project>/instances/<instance>/databases/<database>``.
    When ``SPANNER_EMULATOR_HOST`` is set the dialect talks to the emulator.

    Args:
        db_url: Database connection URL
        **kwargs: Extra engine options

    Returns:
        Configured Engine instance
    """
    return _sqlmodel_create_engine(db_url, **kwargs)


def create_sessionmaker(engine: Engine) -> sessionmaker[Session]:
    """Create a ``sessionmaker`` producing SQLModel sessions.

    Args:
        engine: SQLAlchemy engine

    Returns:
        Configured session factory
    """
    return sessionmaker(engine, class_=Session, expire_on_commit=False)


def create_all(engine: Engine) -> None:
    """Create all tables for the current ORM metadata.

    On Spanner the schema comes from the DDL script instead, because the
    metadata does not carry table interleaving.

    Args:
        engine: SQLAlchemy engine
    """
    Base.metadata.create_all(engine)
