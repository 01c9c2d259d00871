"""
Singer repository.

Provides lookups on the generated ``full_name`` column in addition to the
generic operations of ``BaseRepository``.
"""

from __future__ import annotations

from typing import List

from sqlmodel import Session, select

from ..entities.singers import Singer
from .base import BaseRepository


class SingerRepository(BaseRepository[Singer]):
    """Repository for singer data access operations using SQLModel."""

    def __init__(self, session: Session) -> None:
        super().__init__(session, Singer)

    def find_by_full_name(self, full_name: str) -> List[Singer]:
        """Get all singers whose database-generated full name matches.

        Args:
            full_name: Full name, e.g. ``"Bob Allison"``

        Returns:
            Matching singers, possibly empty
        """
        stmt = select(Singer).where(Singer.full_name == full_name)
        return list(self.session.exec(stmt).all())
