"""
Sample data exercise.

Writes a singer, one of their albums and a track of that album in a single
transaction, then reads them back with a primary-key lookup and a query on
the generated full-name column.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

from sqlmodel import Session

from spanner_orm_tutorial.core.database.entities import Album, Singer, Track
from spanner_orm_tutorial.core.database.repositories import build_repos
from spanner_orm_tutorial.core.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SampleReport:
    """What the sample exercise wrote and found.

    Attributes:
        records_written: Number of rows committed in the write transaction
        album_id: Id of the album that was written
        found_track_title: Title of the track found by composite key, if any
        singers_found: Number of singers matching the full-name query
        singer_last_names: Last names of those singers
    """

    records_written: int
    album_id: str
    found_track_title: Optional[str]
    singers_found: int
    singer_last_names: Tuple[str, ...] = field(default_factory=tuple)


def run_sample_workload(
    session_factory: Callable[[], Session],
    *,
    first_name: str = "Bob",
    last_name: str = "Allison",
    album_title: str = "Let's Go",
    track_title: str = "Go, Go, Go",
) -> SampleReport:
    """Write three related records in one transaction and read them back.

    Args:
        session_factory: Factory producing SQLModel sessions bound to the database
        first_name: Singer's first name
        last_name: Singer's last name
        album_title: Title of the singer's album
        track_title: Title of track 1 of the album

    Returns:
        Report of the records written and found
    """
    with session_factory() as session:
        repos = build_repos(session=session)

        singer = repos.singers.add(Singer(first_name=first_name, last_name=last_name))
        album = repos.albums.add(Album(title=album_title, singer=singer))
        repos.tracks.add(Track(album=album, track_id=1, title=track_title))
        album_id = album.album_id

        # All pending rows go out in one read/write transaction
        logger.info("Writing Singer, Album and Track to the database")
        records_written = len(session.new)
        session.commit()
        logger.info(f"{records_written} records written to the database")

        # Primary key of Track is (album_id, track_id)
        found_track = repos.tracks.get_by_key(album_id, 1)
        found_track_title = found_track.title if found_track is not None else None
        logger.info(f"Found track {found_track_title}")

        full_name = f"{first_name} {last_name}"
        singers = repos.singers.find_by_full_name(full_name)
        last_names = tuple(s.last_name for s in singers)
        logger.info(
            f"Found {len(singers)} singer(s) with full name {full_name}"
            + (f" (last name {last_names[0]})" if last_names else "")
        )

    return SampleReport(
        records_written=records_written,
        album_id=album_id,
        found_track_title=found_track_title,
        singers_found=len(singers),
        singer_last_names=last_names,
    )
