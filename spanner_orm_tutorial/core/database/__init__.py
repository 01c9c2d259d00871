"""
Database layer of the tutorial.

Structure:
- entities/: SQLModel entities mirroring the tables of the DDL script
- repositories/: Data access layer over a SQLModel session
- utils.py: Engine and session factory helpers
"""

from .base import Base, new_id
from .utils import create_all, create_engine, create_sessionmaker

__all__ = [
    "Base",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "new_id",
]
