"""
Database entity models.

This package contains the entity models of the sample music catalogue.
The tables themselves are created by the DDL script; the models mirror
them so the ORM can map rows and order inserts by their relationships.

Modules:
- singers: Singers and their derived full name
- albums: Albums owned by a singer
- tracks: Tracks interleaved in their album
"""

from .albums import Album, AlbumBase
from .singers import Singer, SingerBase
from .tracks import Track, TrackBase

__all__ = [
    "Album",
    "AlbumBase",
    "Singer",
    "SingerBase",
    "Track",
    "TrackBase",
]
