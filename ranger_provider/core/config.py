"""
Configuration Settings.

This module defines the provider configuration using Pydantic's BaseSettings.
It loads the Ranger connection values and logging options from environment
variables and an optional .env file without explicit dotenv loading.
"""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class RangerConnectionConfig(BaseModel):
    """Ranger Admin connection configuration."""

    host: Optional[str] = Field(default=None, alias="RANGER_HOST", description="Ranger Admin base URL")
    username: Optional[str] = Field(default=None, alias="RANGER_USERNAME", description="Ranger Admin username")
    password: Optional[str] = Field(default=None, alias="RANGER_PASSWORD", description="Ranger Admin password")
    request_timeout_seconds: float = Field(
        default=30.0,
        alias="RANGER_REQUEST_TIMEOUT",
        description="Per-request timeout in seconds used by the HTTP client",
    )

    model_config = {"populate_by_name": True}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", alias="RANGER_PROVIDER_LOG_LEVEL", description="Root log level")
    format: str = Field(
        default="detailed", alias="RANGER_PROVIDER_LOG_FORMAT", description="Log format (simple, detailed, json)"
    )
    enable_file_logging: bool = Field(
        default=False, alias="RANGER_PROVIDER_ENABLE_FILE_LOGGING", description="Also write logs to a file"
    )
    file_dir: str = Field(default="logs", alias="RANGER_PROVIDER_LOG_FILE_DIR", description="Directory for log files")

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Provider settings model.

    All properties are automatically bound from environment variables and .env file.
    Values set in the provider configuration block take precedence over these.
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
    # Ranger Connection
    # =====================================================================
    ranger_host: Optional[str] = Field(
        default=None,
        description="URI for the Ranger Admin service",
        alias="RANGER_HOST",
    )
    ranger_username: Optional[str] = Field(
        default=None,
        description="Username for Ranger Admin basic authentication",
        alias="RANGER_USERNAME",
    )
    ranger_password: Optional[str] = Field(
        default=None,
        description="Password for Ranger Admin basic authentication",
        alias="RANGER_PASSWORD",
    )
    request_timeout_seconds: float = Field(
        default=30.0,
        description="Per-request timeout in seconds used by the HTTP client",
        alias="RANGER_REQUEST_TIMEOUT",
    )

    # =====================================================================
    # Logging
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Provider logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="RANGER_PROVIDER_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Provider logging format (simple, detailed, json)",
        alias="RANGER_PROVIDER_LOG_FORMAT",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Write DEBUG logs to a file in addition to the console",
        alias="RANGER_PROVIDER_ENABLE_FILE_LOGGING",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory that receives the provider log file",
        alias="RANGER_PROVIDER_LOG_FILE_DIR",
    )

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def ranger(self) -> RangerConnectionConfig:
        """Get Ranger connection configuration from environment variables."""
        return RangerConnectionConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def logging(self) -> LoggingConfig:
        """Get logging configuration from environment variables."""
        return LoggingConfig.model_validate(self.model_dump(by_alias=True))
