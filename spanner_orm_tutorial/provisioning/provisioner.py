"""
Idempotent resource provisioning.

Creates the instance and the database on the emulator if they are absent.
An ``AlreadyExists`` status from the admin service is reported as
``ProvisionOutcome.ALREADY_EXISTS``; any other error propagates unchanged.
Re-running against an already provisioned emulator therefore succeeds without
touching the existing resources.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from google.api_core.exceptions import AlreadyExists
from google.cloud import spanner

from spanner_orm_tutorial.core.config import DatabaseConfig
from spanner_orm_tutorial.core.logging_config import get_logger

from .outcome import ProvisionOutcome, ProvisionResult
from .schema import SchemaLoader

logger = get_logger(__name__)

EMULATOR_INSTANCE_CONFIG = "emulator-config"
INSTANCE_DISPLAY_NAME = "Sample Instance"
INSTANCE_NODE_COUNT = 1


def build_spanner_client(project_id: str) -> spanner.Client:
    """Create a Spanner client for a project.

    With ``SPANNER_EMULATOR_HOST`` exported the client connects to the emulator
    over an insecure channel with anonymous credentials.
    """
    return spanner.Client(project=project_id)


class ResourceProvisioner:
    """Ensure the instance and database used by the tutorial exist.

    Args:
        client: ``google.cloud.spanner.Client`` bound to the target project
        operation_timeout: Seconds to wait for each long-running admin operation
    """

    def __init__(self, client: Any, *, operation_timeout: float = 120.0) -> None:
        self.client = client
        self.operation_timeout = operation_timeout

    def _create_if_absent(self, resource: str, create: Callable[[], Any]) -> ProvisionOutcome:
        try:
            operation = create()
            operation.result(self.operation_timeout)
        except AlreadyExists:
            logger.info(f"{resource} already exists")
            return ProvisionOutcome.ALREADY_EXISTS
        logger.info(f"Created {resource}")
        return ProvisionOutcome.CREATED

    def ensure_instance(self, project_id: str, instance_id: str) -> ProvisionOutcome:
        """Create the instance unless it already exists.

        Args:
            project_id: Project owning the instance
            instance_id: Instance id

        Returns:
            CREATED or ALREADY_EXISTS
        """
        instance = self.client.instance(
            instance_id,
            configuration_name=f"projects/{project_id}/instanceConfigs/{EMULATOR_INSTANCE_CONFIG}",
            display_name=INSTANCE_DISPLAY_NAME,
            node_count=INSTANCE_NODE_COUNT,
        )
        return self._create_if_absent(f"Instance projects/{project_id}/instances/{instance_id}", instance.create)

    def ensure_database(self, instance_ref: Any, database_id: str) -> ProvisionOutcome:
        """Create the database unless it already exists.

        Args:
            instance_ref: ``google.cloud.spanner_v1.instance.Instance`` holding the database
            database_id: Database id

        Returns:
            CREATED or ALREADY_EXISTS
        """
        database = instance_ref.database(database_id)
        return self._create_if_absent(f"Database {database_id}", database.create)

    def provision(self, config: DatabaseConfig, schema_loader: Optional[SchemaLoader] = None) -> ProvisionResult:
        """Provision instance, database and, for a new database only, its schema.

        Args:
            config: Target project, instance and database
            schema_loader: Loader applying the DDL script; built from ``config`` when omitted

        Returns:
            Outcomes of each step
        """
        loader = schema_loader or SchemaLoader(config.schema_file, operation_timeout=self.operation_timeout)

        instance_outcome = self.ensure_instance(config.project_id, config.instance_id)
        instance_ref = self.client.instance(config.instance_id)
        database_outcome = self.ensure_database(instance_ref, config.database_id)

        schema = None
        if database_outcome.created:
            schema = loader.load(instance_ref.database(config.database_id))
        return ProvisionResult(instance=instance_outcome, database=database_outcome, schema=schema)
