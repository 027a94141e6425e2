"""
Application Settings - Main Layer

Pydantic Settings for configuration management. Values come from
environment variables, a ``.env`` file and defaults. Variable names
follow the deployment conventions of the service (``MONGO_HOST``,
``REDIS_TIMEOUT``, ``WAIT``, ``WEB_SERVER_PORT``...).
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from liveness.domain.entities.run import ParallelStrategy
from liveness.shared import EnumEnvironment, EnumLogLevel
from liveness.shared.consts import DEFAULT_HEALTH_TARGETS, DEFAULT_WEB_SERVER_PORT
from liveness.shared.env import load_secret_file_variables  # noqa: F401


class ServerSettings(BaseSettings):
    """HTTP server configuration settings."""

    title: str = Field(default="Liveness Aggregator", description="Service title")
    description: str = Field(
        default="Aggregated liveness verdict for the service dependencies",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    host: str = Field(default="0.0.0.0", description="Interface to bind the server")
    port: int = Field(
        default=DEFAULT_WEB_SERVER_PORT,
        description="Port to bind the server",
        alias="WEB_SERVER_PORT",
    )
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="SERVER_", case_sensitive=False, extra="ignore"
    )


class MongoSettings(BaseSettings):
    """Document store probe settings."""

    host: str = Field(
        default="localhost:27017",
        description="MongoDB host:port or connection URI",
    )
    timeout: float = Field(default=3.0, gt=0, description="Check timeout in seconds")

    model_config = SettingsConfigDict(
        env_prefix="MONGO_", case_sensitive=False, extra="ignore"
    )


class RedisSettings(BaseSettings):
    """Key-value cache probe settings."""

    host: str = Field(
        default="redis://localhost:6379/15", description="Redis connection URL"
    )
    timeout: float = Field(default=3.0, gt=0, description="Check timeout in seconds")

    model_config = SettingsConfigDict(
        env_prefix="REDIS_", case_sensitive=False, extra="ignore"
    )


class HealthSettings(BaseSettings):
    """Orchestration settings."""

    targets: str = Field(
        default=DEFAULT_HEALTH_TARGETS,
        description="Comma separated probes, in check order",
    )
    wait: float = Field(
        default=0.0,
        ge=0,
        description="Delay in seconds after each probe check",
        alias="WAIT",
    )
    parallel_strategy: ParallelStrategy = Field(
        default=ParallelStrategy.RACE,
        description="Aggregation used by /parallel-healthcheck",
    )

    model_config = SettingsConfigDict(
        env_prefix="HEALTH_", case_sensitive=False, extra="ignore"
    )

    @field_validator("targets")
    @classmethod
    def _targets_not_empty(cls, value: str) -> str:
        if not [item for item in value.split(",") if item.strip()]:
            raise ValueError("at least one health target is required")
        return value


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

    server: ServerSettings = Field(default_factory=ServerSettings)
    mongo: MongoSettings = Field(default_factory=MongoSettings)
    redis: RedisSettings = Field(default_factory=RedisSettings)
    health: HealthSettings = Field(default_factory=HealthSettings)
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

    Patched in tests to provide environment specific settings.
    """
    return AppSettings()
