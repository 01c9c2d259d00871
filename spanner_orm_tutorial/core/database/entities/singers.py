"""
Singer entity models.

A singer owns zero or more albums. The full name is a stored generated
column computed by the database, so it is never written by the ORM and
can be used in query predicates.
"""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Column, Computed, String
from sqlmodel import Field, Relationship

from ..base import Base, new_id

if TYPE_CHECKING:
    from .albums import Album

FULL_NAME_EXPRESSION = "COALESCE(first_name || ' ', '') || last_name"


class SingerBase(Base):
    """Base fields for a singer."""

    first_name: Optional[str] = Field(default=None, max_length=200, description="Given name")
    last_name: str = Field(max_length=200, description="Family name")


class Singer(SingerBase, table=True):
    """Persistent singer.

    Table: singers
    """

    __tablename__ = "singers"
    __table_args__ = ({"extend_existing": True},)

    # Primary key
    singer_id: str = Field(default_factory=new_id, primary_key=True, max_length=36)

    # Generated by the database from first_name and last_name
    full_name: Optional[str] = Field(
        default=None,
        sa_column=Column("full_name", String(400), Computed(FULL_NAME_EXPRESSION, persisted=True)),
    )

    # Relationships
    albums: List["Album"] = Relationship(back_populates="singer")

    def __repr__(self) -> str:
        return f"Singer(id={self.singer_id}, first_name={self.first_name}, last_name={self.last_name})"
