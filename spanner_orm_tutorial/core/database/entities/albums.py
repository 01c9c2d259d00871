"""
Album entity models.

An album always belongs to exactly one singer (foreign key ``FK_Albums_Singers``
in the DDL script) and owns the tracks interleaved in it.
"""

from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship

from ..base import Base, new_id

if TYPE_CHECKING:
    from .singers import Singer
    from .tracks import Track


class AlbumBase(Base):
    """Base fields for an album."""

    title: str = Field(max_length=100, description="Album title")


class Album(AlbumBase, table=True):
    """Persistent album.

    Table: albums
    """

    __tablename__ = "albums"
    __table_args__ = ({"extend_existing": True},)

    # Primary key
    album_id: str = Field(default_factory=new_id, primary_key=True, max_length=36)

    # Foreign key to singer, filled in from the relationship at flush time
    singer_id: Optional[str] = Field(
        default=None, foreign_key="singers.singer_id", max_length=36, nullable=False
    )

    # Relationships
    singer: Optional["Singer"] = Relationship(back_populates="albums")
    tracks: List["Track"] = Relationship(back_populates="album")

    def __repr__(self) -> str:
        return f"Album(id={self.album_id}, title={self.title}, singer_id={self.singer_id})"
