"""
Sample application entry point.

Runs the whole tutorial against a local Cloud Spanner emulator: start the
emulator, provision instance, database and schema, run the sample workload,
and always stop the emulator again. No manual setup is required.
"""

from __future__ import annotations

from typing import Optional

from spanner_orm_tutorial.core.config import Settings, export_emulator_host
from spanner_orm_tutorial.core.config import settings as default_settings
from spanner_orm_tutorial.core.database import create_engine, create_sessionmaker
from spanner_orm_tutorial.core.logging_config import get_logger, setup_logging
from spanner_orm_tutorial.emulator import EmulatorRunner
from spanner_orm_tutorial.provisioning import ProvisionResult, ResourceProvisioner, build_spanner_client
from spanner_orm_tutorial.sample import SampleReport, run_sample_workload

logger = get_logger(__name__)


def setup(settings: Settings, emulator_runner: EmulatorRunner) -> ProvisionResult:
    """Start the emulator and make sure the sample database exists.

    Args:
        settings: Application settings
        emulator_runner: Runner owning the emulator process

    Returns:
        Provisioning outcomes
    """
    emulator_runner.start()

    database_config = settings.database
    provisioner = ResourceProvisioner(
        build_spanner_client(database_config.project_id),
        operation_timeout=database_config.operation_timeout,
    )
    return provisioner.provision(database_config)


def run_sample_app(
    settings: Optional[Settings] = None,
    emulator_runner: Optional[EmulatorRunner] = None,
) -> SampleReport:
    """Run the tutorial end to end.

    The emulator is stopped in all cases, including when provisioning or the
    workload raise; the error then propagates to the caller.

    Args:
        settings: Application settings, defaults to the module-level settings
        emulator_runner: Emulator runner, built from ``settings`` when omitted

    Returns:
        Report of the sample workload
    """
    settings = settings if settings is not None else default_settings

    # Routes the Spanner client and the SQLAlchemy dialect to the emulator.
    # Remove this to run against a real Cloud Spanner database.
    export_emulator_host(settings)
    runner = emulator_runner if emulator_runner is not None else EmulatorRunner(settings.emulator)
    try:
        setup(settings, runner)

        database_url = settings.database.url
        logger.info(f"Connecting to database {database_url}")
        engine = create_engine(database_url)
        try:
            return run_sample_workload(create_sessionmaker(engine))
        finally:
            engine.dispose()
    finally:
        runner.stop()


def main() -> None:
    """Console entry point.

    Errors are not caught here: after the emulator has been stopped they reach
    the interpreter, which prints the traceback and exits with a non-zero status.
    """
    setup_logging(log_level=default_settings.log_level, log_format=default_settings.log_format)
    run_sample_app()
