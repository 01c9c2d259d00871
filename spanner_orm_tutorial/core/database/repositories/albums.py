"""
Album repository.
"""

from __future__ import annotations

from sqlmodel import Session

from ..entities.albums import Album
from .base import BaseRepository


class AlbumRepository(BaseRepository[Album]):
    """Repository for album data access operations using SQLModel."""

    def __init__(self, session: Session) -> None:
        super().__init__(session, Album)
