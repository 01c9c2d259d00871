"""
Database repository layer using SQLModel.

Modules:
- base: BaseRepository staging and key lookups
- singers: Singer lookups by generated full name
- albums: Album staging
- tracks: Track lookups by composite key
- bundle: RepoBundle sharing one session
"""

from .albums import AlbumRepository
from .base import BaseRepository
from .bundle import RepoBundle, build_repos
from .singers import SingerRepository
from .tracks import TrackRepository

__all__ = [
    "AlbumRepository",
    "BaseRepository",
    "RepoBundle",
    "SingerRepository",
    "TrackRepository",
    "build_repos",
]
