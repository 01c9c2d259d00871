"""
Provisioning outcomes.

Create-if-absent operations report whether they created the resource or found
it already there, so callers branch on a value instead of catching errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .schema import DdlBatch


class ProvisionOutcome(str, Enum):
    """Result of an idempotent create."""

    CREATED = "created"
    ALREADY_EXISTS = "already_exists"

    @property
    def created(self) -> bool:
        return self is ProvisionOutcome.CREATED


@dataclass(frozen=True)
class ProvisionResult:
    """Outcome of provisioning the instance, the database and its schema.

    Attributes:
        instance: Whether the instance was created or already existed
        database: Whether the database was created or already existed
        schema: The DDL batch applied, or None when the database already existed
    """

    instance: ProvisionOutcome
    database: ProvisionOutcome
    schema: Optional["DdlBatch"] = None

    @property
    def schema_applied(self) -> bool:
        return self.schema is not None
