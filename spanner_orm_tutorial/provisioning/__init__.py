"""
Provisioning of the emulator resources the tutorial runs against.

Modules:
- outcome: ProvisionOutcome and ProvisionResult
- schema: DDL script splitting and loading
- provisioner: Idempotent instance and database creation
"""

from .outcome import ProvisionOutcome, ProvisionResult
from .provisioner import ResourceProvisioner, build_spanner_client
from .schema import DdlBatch, SchemaLoader, read_ddl_script, split_ddl_script

__all__ = [
    "DdlBatch",
    "ProvisionOutcome",
    "ProvisionResult",
    "ResourceProvisioner",
    "SchemaLoader",
    "build_spanner_client",
    "read_ddl_script",
    "split_ddl_script",
]
