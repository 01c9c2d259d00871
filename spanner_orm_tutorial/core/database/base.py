"""
Base database models and utilities.

This module provides the foundational database components used across
all entities in the database layer using SQLModel.
"""

from __future__ import annotations

import uuid

from pydantic import ConfigDict
from sqlmodel import SQLModel


class Base(SQLModel):
    """Base class for all SQLModel entities."""

    model_config = ConfigDict(arbitrary_types_allowed=True)


def new_id() -> str:
    """Generate a client-side primary key.

    Cloud Spanner has no auto-increment columns, so rows are keyed by a random
    UUID stored as ``STRING(36)``, which also spreads writes across splits.
    """
    return str(uuid.uuid4())
