"""Unit tests for the sample workload.

The workload runs unchanged against an in-memory SQLite database built from
the ORM metadata.
"""

from __future__ import annotations

from sqlmodel import select

from spanner_orm_tutorial.core.database.entities import Album, Singer, Track
from spanner_orm_tutorial.sample import SampleReport, run_sample_workload


class TestRunSampleWorkload:
    """Tests for run_sample_workload."""

    def test_writes_three_records_in_one_commit(self, session_factory):
        """Test singer, album and track are written together."""
        report = run_sample_workload(session_factory)

        assert isinstance(report, SampleReport)
        assert report.records_written == 3

        with session_factory() as session:
            assert len(session.exec(select(Singer)).all()) == 1
            assert len(session.exec(select(Album)).all()) == 1
            assert len(session.exec(select(Track)).all()) == 1

    def test_track_found_by_composite_key(self, session_factory):
        """Test the lookup by (album_id, 1) finds "Go, Go, Go"."""
        report = run_sample_workload(session_factory)

        assert report.found_track_title == "Go, Go, Go"
        with session_factory() as session:
            track = session.get(Track, (report.album_id, 1))
            assert track is not None
            assert track.title == "Go, Go, Go"

    def test_singer_found_by_full_name(self, session_factory):
        """Test the full-name query finds exactly one Allison."""
        report = run_sample_workload(session_factory)

        assert report.singers_found == 1
        assert report.singer_last_names == ("Allison",)

    def test_relationships_are_persisted(self, session_factory):
        """Test the foreign keys were filled from the relationships."""
        report = run_sample_workload(session_factory)

        with session_factory() as session:
            album = session.get(Album, report.album_id)
            singer = session.exec(select(Singer)).one()
            assert album.singer_id == singer.singer_id
            assert singer.full_name == "Bob Allison"

    def test_custom_names(self, session_factory):
        """Test the written values can be changed."""
        report = run_sample_workload(
            session_factory, first_name="Alice", last_name="Trentor", track_title="Intro"
        )

        assert report.found_track_title == "Intro"
        assert report.singer_last_names == ("Trentor",)

    def test_repeated_runs_add_new_rows(self, session_factory):
        """Test each run writes fresh keys, so the full-name query sees all runs."""
        run_sample_workload(session_factory)
        report = run_sample_workload(session_factory)

        assert report.records_written == 3
        assert report.singers_found == 2
