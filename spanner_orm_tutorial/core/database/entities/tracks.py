"""
Track entity models.

Tracks are interleaved in their parent album, so the album id is the first
part of the composite primary key ``(album_id, track_id)``.
"""

from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship

from ..base import Base

if TYPE_CHECKING:
    from .albums import Album


class TrackBase(Base):
    """Base fields for a track."""

    title: str = Field(max_length=200, description="Track title")


class Track(TrackBase, table=True):
    """Persistent track.

    Table: tracks (INTERLEAVE IN PARENT albums)
    """

    __tablename__ = "tracks"
    __table_args__ = ({"extend_existing": True},)

    # Composite primary key, parent key first
    album_id: Optional[str] = Field(
        default=None, foreign_key="albums.album_id", primary_key=True, max_length=36
    )
    track_id: int = Field(primary_key=True, description="Track number within the album")

    # Relationships
    album: Optional["Album"] = Relationship(back_populates="tracks")

    def __repr__(self) -> str:
        return f"Track(album_id={self.album_id}, track_id={self.track_id}, title={self.title})"
