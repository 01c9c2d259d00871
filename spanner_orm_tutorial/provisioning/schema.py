"""
Schema loading.

The data model lives in a plain DDL script. It is split into individual
statements on ``;`` and applied to a newly created database as one DDL batch,
so the schema is created exactly once per database.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Sequence, Tuple

from spanner_orm_tutorial.core.logging_config import get_logger
from spanner_orm_tutorial.errors import SchemaScriptError

logger = get_logger(__name__)

STATEMENT_SEPARATOR = ";"
LINE_BREAK_CHARS = "\r\n"


def split_ddl_script(script: str) -> List[str]:
    """Split a DDL script into statements.

    Each fragment between separators has leading and trailing ``\\r``/``\\n``
    removed. The empty fragment produced by a terminal separator is dropped;
    other fragments are kept as they are.

    >>> split_ddl_script("CREATE TABLE A (x INT64) PRIMARY KEY (x);\\nCREATE TABLE B (y INT64) PRIMARY KEY (y);\\n")
    ['CREATE TABLE A (x INT64) PRIMARY KEY (x)', 'CREATE TABLE B (y INT64) PRIMARY KEY (y)']
    """
    statements = [fragment.strip(LINE_BREAK_CHARS) for fragment in script.split(STATEMENT_SEPARATOR)]
    if statements and statements[-1] == "":
        statements.pop()
    return statements


@dataclass(frozen=True)
class DdlBatch:
    """A schema-creation batch: a primary statement plus accompanying statements."""

    primary: str
    extra: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_statements(cls, statements: Sequence[str]) -> "DdlBatch":
        """Build a batch from split statements.

        Raises:
            SchemaScriptError: There are no statements at all.
        """
        if not statements:
            raise SchemaScriptError("DDL script contains no statements")
        return cls(primary=statements[0].strip(), extra=tuple(statements[1:]))

    @property
    def statements(self) -> List[str]:
        return [self.primary, *self.extra]

    def __len__(self) -> int:
        return 1 + len(self.extra)


def read_ddl_script(path: Path) -> str:
    """Read a DDL script as UTF-8 text.

    Raises:
        SchemaScriptError: The file does not exist.
    """
    path = Path(path)
    if not path.is_file():
        raise SchemaScriptError("DDL script not found", path=path)
    return path.read_text(encoding="utf-8")


class SchemaLoader:
    """Apply a DDL script to a Spanner database.

    Args:
        script_path: Location of the DDL script
        operation_timeout: Seconds to wait for the schema update operation
    """

    def __init__(self, script_path: Path, *, operation_timeout: float = 120.0) -> None:
        self.script_path = Path(script_path)
        self.operation_timeout = operation_timeout

    def build_batch(self) -> DdlBatch:
        return DdlBatch.from_statements(split_ddl_script(read_ddl_script(self.script_path)))

    def load(self, database: Any) -> DdlBatch:
        """Submit the script's statements as one DDL batch and wait for it.

        Args:
            database: ``google.cloud.spanner_v1.database.Database`` to update

        Returns:
            The batch that was applied
        """
        batch = self.build_batch()
        logger.info(f"Applying {len(batch)} DDL statement(s) from {self.script_path.name}")
        operation = database.update_ddl(batch.statements)
        operation.result(self.operation_timeout)
        return batch
