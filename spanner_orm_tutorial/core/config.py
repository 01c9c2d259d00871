"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SCHEMA_FILE = Path(__file__).resolve().parent.parent / "data" / "data_model.sql"

# Environment variable the Google Cloud client libraries read to route calls to an emulator
EMULATOR_HOST_ENV_VAR = "SPANNER_EMULATOR_HOST"


def validate_host_port(value: str) -> str:
    """Require a ``host:port`` address with an integer port."""
    host, sep, port = value.rpartition(":")
    if not sep or not host or not port.isdigit():
        raise ValueError(f"emulator address must be host:port, got {value!r}")
    return value


# =====================================================================
# Grouped Configuration Models
# =====================================================================


class EmulatorConfig(BaseModel):
    """Cloud Spanner emulator configuration."""

    host: str = Field(
        default="localhost:9010",
        alias="SPANNER_EMULATOR_HOST",
        description="host:port the emulator gRPC endpoint is reachable on",
    )
    image: str = Field(
        default="gcr.io/cloud-spanner-emulator/emulator:latest",
        alias="SPANNER_EMULATOR_IMAGE",
        description="Docker image used to run the emulator",
    )
    managed: bool = Field(
        default=True,
        alias="SPANNER_EMULATOR_MANAGED",
        description="Start and stop the emulator container from this program",
    )
    startup_timeout: float = Field(
        default=60.0,
        alias="SPANNER_EMULATOR_STARTUP_TIMEOUT",
        description="Seconds to wait for the emulator to accept requests",
    )

    model_config = {"populate_by_name": True}

    @field_validator("host")
    @classmethod
    def check_host(cls, value: str) -> str:
        return validate_host_port(value)

    @property
    def port(self) -> int:
        """Port part of the emulator address."""
        return int(self.host.rsplit(":", 1)[1])


class DatabaseConfig(BaseModel):
    """Target project, instance and database on the emulator."""

    project_id: str = Field(default="sample-project", alias="SPANNER_PROJECT_ID", description="Project id")
    instance_id: str = Field(default="sample-instance", alias="SPANNER_INSTANCE_ID", description="Instance id")
    database_id: str = Field(default="sample-database", alias="SPANNER_DATABASE_ID", description="Database id")
    schema_file: Path = Field(
        default=DEFAULT_SCHEMA_FILE,
        alias="SPANNER_SCHEMA_FILE",
        description="DDL script applied to a newly created database",
    )
    operation_timeout: float = Field(
        default=120.0,
        alias="SPANNER_OPERATION_TIMEOUT",
        description="Seconds to wait for admin long-running operations",
    )

    model_config = {"populate_by_name": True}

    @property
    def instance_name(self) -> str:
        return f"projects/{self.project_id}/instances/{self.instance_id}"

    @property
    def database_name(self) -> str:
        return f"{self.instance_name}/databases/{self.database_id}"

    @property
    def url(self) -> str:
        """SQLAlchemy URL for the ``sqlalchemy-spanner`` dialect."""
        return f"spanner+spanner:///{self.database_name}"


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Emulator Configuration
    # =====================================================================
    emulator_host: str = Field(default="localhost:9010", alias="SPANNER_EMULATOR_HOST")
    emulator_image: str = Field(
        default="gcr.io/cloud-spanner-emulator/emulator:latest", alias="SPANNER_EMULATOR_IMAGE"
    )
    emulator_managed: bool = Field(default=True, alias="SPANNER_EMULATOR_MANAGED")
    emulator_startup_timeout: float = Field(default=60.0, alias="SPANNER_EMULATOR_STARTUP_TIMEOUT")

    @field_validator("emulator_host")
    @classmethod
    def check_emulator_host(cls, value: str) -> str:
        return validate_host_port(value)

    # =====================================================================
    # Database Configuration
    # =====================================================================
    project_id: str = Field(default="sample-project", alias="SPANNER_PROJECT_ID")
    instance_id: str = Field(default="sample-instance", alias="SPANNER_INSTANCE_ID")
    database_id: str = Field(default="sample-database", alias="SPANNER_DATABASE_ID")
    schema_file: Path = Field(default=DEFAULT_SCHEMA_FILE, alias="SPANNER_SCHEMA_FILE")
    operation_timeout: float = Field(default=120.0, alias="SPANNER_OPERATION_TIMEOUT")

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="SPANNER_ORM_TUTORIAL_LOG_LEVEL",
    )
    log_format: str = Field(default="simple", alias="LOG_FORMAT", description="simple, detailed or json")
    log_file_dir: str = Field(default="logs", alias="LOG_FILE_DIR")
    enable_file_logging: bool = Field(default=False, alias="ENABLE_FILE_LOGGING")

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def emulator(self) -> EmulatorConfig:
        """Get emulator configuration from environment variables."""
        return EmulatorConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def database(self) -> DatabaseConfig:
        """Get database configuration from environment variables."""
        return DatabaseConfig.model_validate(self.model_dump(by_alias=True))


def export_emulator_host(settings: Settings, environ: Optional[dict] = None) -> str:
    """Export the emulator address to ``SPANNER_EMULATOR_HOST``.

    The Spanner client and the SQLAlchemy dialect both read this variable and,
    when it is set, connect to the emulator with an insecure channel and
    anonymous credentials instead of the production endpoint.

    Args:
        settings: Application settings
        environ: Mapping to write into, defaults to ``os.environ``

    Returns:
        The exported address
    """
    target = os.environ if environ is None else environ
    target[EMULATOR_HOST_ENV_VAR] = settings.emulator.host
    return settings.emulator.host


settings = Settings()
