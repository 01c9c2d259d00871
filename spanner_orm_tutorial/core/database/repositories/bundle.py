"""
Repository bundle for dependency injection.

This module provides a convenience bundle of all repository instances
sharing one session, and therefore one unit of work.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlmodel import Session

from .albums import AlbumRepository
from .singers import SingerRepository
from .tracks import TrackRepository


@dataclass(frozen=True)
class RepoBundle:
    """Convenience bundle of all catalogue repositories."""

    session: Session
    singers: SingerRepository
    albums: AlbumRepository
    tracks: TrackRepository


def build_repos(*, session: Session) -> RepoBundle:
    """Build a RepoBundle from an existing session.

    Args:
        session: Open SQLModel session

    Returns:
        Bundle containing all repository instances
    """
    return RepoBundle(
        session=session,
        singers=SingerRepository(session),
        albums=AlbumRepository(session),
        tracks=TrackRepository(session),
    )
