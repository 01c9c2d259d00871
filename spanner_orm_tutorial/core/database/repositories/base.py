"""
Base repository interfaces and utilities.

This module provides the repository pattern shared by the catalogue
repositories. Repositories only stage changes on the session; committing is
left to the caller so several writes can share one transaction.
"""

from __future__ import annotations

from typing import Any, Generic, Optional, Type, TypeVar

from sqlmodel import Session, SQLModel

# Generic type for SQLModel entities
EntityType = TypeVar("EntityType", bound=SQLModel)


class BaseRepository(Generic[EntityType]):
    """Base repository staging new entities and reading them back by key."""

    def __init__(self, session: Session, model: Type[EntityType]) -> None:
        """Initialize repository with database session and SQLModel entity class.

        Args:
            session: SQLModel Session for database operations
            model: SQLModel entity class for this repository
        """
        self.session = session
        self.model = model

    def add(self, entity: EntityType) -> EntityType:
        """Stage a new entity in the session's unit of work.

        Args:
            entity: SQLModel instance to persist on the next commit

        Returns:
            The same entity, now pending
        """
        self.session.add(entity)
        return entity

    def get_by_id(self, entity_id: Any) -> Optional[EntityType]:
        """Get entity by its primary key.

        Args:
            entity_id: Primary key value, or a tuple for composite keys in column order

        Returns:
            Entity instance or None if not found
        """
        return self.session.get(self.model, entity_id)
