"""
Core utilities and configuration for the Spanner ORM tutorial.

This package provides logging configuration, settings and the database layer.
"""

from spanner_orm_tutorial.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
