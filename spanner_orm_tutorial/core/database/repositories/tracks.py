"""
Track repository.

Tracks are addressed by the composite key ``(album_id, track_id)``.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Session

from ..entities.tracks import Track
from .base import BaseRepository


class TrackRepository(BaseRepository[Track]):
    """Repository for track data access operations using SQLModel."""

    def __init__(self, session: Session) -> None:
        super().__init__(session, Track)

    def get_by_key(self, album_id: str, track_id: int) -> Optional[Track]:
        """Get a track by its composite primary key.

        Args:
            album_id: Parent album id
            track_id: Track number within the album

        Returns:
            Track instance or None
        """
        return self.get_by_id((album_id, track_id))
