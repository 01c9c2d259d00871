"""Unit tests for the application runner.

The emulator runner and the Spanner client are mocked; the ORM workload runs
against in-memory SQLite so the whole sequence executes without Docker.
"""

from __future__ import annotations

import os
from unittest.mock import MagicMock, call, patch

import pytest
from google.api_core.exceptions import AlreadyExists, ServiceUnavailable

from spanner_orm_tutorial import app
from spanner_orm_tutorial.errors import EmulatorStartError
from spanner_orm_tutorial.provisioning import ProvisionOutcome


@pytest.fixture
def settings(make_settings, clean_emulator_env):
    return make_settings(SPANNER_EMULATOR_HOST="localhost:19010")


@pytest.fixture
def runner():
    return MagicMock()


@pytest.fixture
def spanner_client():
    with patch("spanner_orm_tutorial.app.build_spanner_client") as build:
        yield build.return_value


@pytest.fixture
def sqlite_backend(sqlite_engine):
    """Route the app's engine creation to the SQLite test engine."""
    with patch("spanner_orm_tutorial.app.create_engine", return_value=sqlite_engine) as create_engine:
        yield create_engine


class TestRunSampleApp:
    """Tests for run_sample_app."""

    def test_full_run(self, settings, runner, spanner_client, sqlite_backend):
        """Test the run provisions, writes and reads, then stops the emulator."""
        report = app.run_sample_app(settings, emulator_runner=runner)

        assert report.records_written == 3
        assert report.found_track_title == "Go, Go, Go"
        assert report.singers_found == 1
        assert report.singer_last_names == ("Allison",)

        runner.start.assert_called_once()
        runner.stop.assert_called_once()
        sqlite_backend.assert_called_once_with(
            "spanner+spanner:///projects/sample-project/instances/sample-instance/databases/sample-database"
        )
        database = spanner_client.instance.return_value.database.return_value
        database.update_ddl.assert_called_once()

    def test_exports_emulator_host(self, settings, runner, spanner_client, sqlite_backend):
        """Test client libraries are pointed at the emulator."""
        app.run_sample_app(settings, emulator_runner=runner)

        assert os.environ["SPANNER_EMULATOR_HOST"] == "localhost:19010"

    def test_rerun_skips_schema(self, settings, runner, spanner_client, sqlite_backend):
        """Test an already provisioned emulator is reused without reapplying DDL."""
        instance = spanner_client.instance.return_value
        instance.create.side_effect = AlreadyExists("instance exists")
        instance.database.return_value.create.side_effect = AlreadyExists("db exists")

        report = app.run_sample_app(settings, emulator_runner=runner)

        assert report.records_written == 3
        instance.database.return_value.update_ddl.assert_not_called()

    def test_emulator_start_failure_is_fatal(self, settings, runner, spanner_client, sqlite_backend):
        """Test no provisioning or data calls happen when the emulator fails to start."""
        runner.start.side_effect = EmulatorStartError("emulator:test", "docker not available")

        with pytest.raises(EmulatorStartError):
            app.run_sample_app(settings, emulator_runner=runner)

        spanner_client.instance.assert_not_called()
        sqlite_backend.assert_not_called()
        runner.stop.assert_called_once()

    def test_stop_runs_when_provisioning_fails(self, settings, runner, spanner_client, sqlite_backend):
        """Test the emulator is stopped when an admin call fails."""
        spanner_client.instance.return_value.create.side_effect = ServiceUnavailable("down")

        with pytest.raises(ServiceUnavailable):
            app.run_sample_app(settings, emulator_runner=runner)

        sqlite_backend.assert_not_called()
        runner.stop.assert_called_once()

    def test_stop_runs_when_workload_fails(self, settings, runner, spanner_client, sqlite_backend):
        """Test the emulator is stopped when the data exercise raises."""
        with patch("spanner_orm_tutorial.app.run_sample_workload", side_effect=RuntimeError("write failed")):
            with pytest.raises(RuntimeError, match="write failed"):
                app.run_sample_app(settings, emulator_runner=runner)

        runner.stop.assert_called_once()

    def test_start_precedes_provisioning(self, settings, spanner_client, sqlite_backend):
        """Test the emulator is started before any admin call and stopped last."""
        manager = MagicMock()
        manager.attach_mock(spanner_client.instance, "instance")

        app.run_sample_app(settings, emulator_runner=manager.runner)

        names = [c[0] for c in manager.mock_calls]
        assert names[0] == "runner.start"
        assert names[-1] == "runner.stop"
        assert "instance" in names
        assert manager.mock_calls[0] == call.runner.start()

    def test_falsy_injected_runner_is_used(self, settings, runner, spanner_client, sqlite_backend):
        """Test an injected runner is used even when it evaluates as false."""
        runner.__bool__.return_value = False

        with patch("spanner_orm_tutorial.app.EmulatorRunner") as default_runner:
            app.run_sample_app(settings, emulator_runner=runner)

        default_runner.assert_not_called()
        assert runner.mock_calls[0] == call.start()
        runner.start.assert_called_once()
        runner.stop.assert_called_once()


class TestMain:
    """Tests for the console entry point."""

    def test_main_configures_logging_and_runs(self):
        """Test main sets up logging and runs the app."""
        with patch("spanner_orm_tutorial.app.setup_logging") as setup_logging, patch(
            "spanner_orm_tutorial.app.run_sample_app"
        ) as run_sample_app:
            app.main()

        setup_logging.assert_called_once()
        run_sample_app.assert_called_once_with()

    def test_main_propagates_errors(self):
        """Test errors are not swallowed, so the process exits non-zero."""
        with patch("spanner_orm_tutorial.app.setup_logging"), patch(
            "spanner_orm_tutorial.app.run_sample_app", side_effect=ServiceUnavailable("down")
        ):
            with pytest.raises(ServiceUnavailable):
                app.main()
