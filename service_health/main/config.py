"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from service_health.shared import EnumEnvironment, EnumLogLevel
from service_health.shared.consts import (
    DEFAULT_HEALTH_ENDPOINT,
    DEFAULT_PROBE_TIMEOUT_SECONDS,
    DEFAULT_SERVICE_NAME,
    DEFAULT_SERVICE_VERSION,
)


class HealthSettings(BaseSettings):
    """Health endpoint configuration settings."""

    endpoint: str = Field(
        default=DEFAULT_HEALTH_ENDPOINT,
        description="Request path answered with the health report",
    )
    service: str = Field(default=DEFAULT_SERVICE_NAME, description="Service name")
    version: str = Field(
        default=DEFAULT_SERVICE_VERSION, description="Service version"
    )
    environment: Optional[str] = Field(
        default=None,
        description="Environment shown in the report; defaults to ENVIRONMENT",
    )
    include_details: bool = Field(
        default=True, description="Include process metrics in the system probe"
    )
    probe_timeout_seconds: float = Field(
        default=DEFAULT_PROBE_TIMEOUT_SECONDS,
        description="Upper bound for a single probe; 0 or less disables it",
    )
    probe_workers: Optional[int] = Field(
        default=None,
        description="Threads for blocking probes; defaults to the executor default",
    )

    model_config = SettingsConfigDict(
        env_prefix="HEALTH_", case_sensitive=False, extra="ignore"
    )


class ServerSettings(BaseSettings):
    """HTTP server settings used by the module entry point."""

    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="SERVER_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    health: HealthSettings = Field(default_factory=HealthSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings per environment.
    """
    return AppSettings()
