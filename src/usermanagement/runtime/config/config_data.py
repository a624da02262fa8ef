"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field, computed_field


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    name: str = Field(default="user-management", description="Application name")


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./database.db", description="Database connection URL"
    )
    echo: bool = Field(default=False, description="Echo SQL statements")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")

    @computed_field
    @property
    def is_sqlite(self) -> bool:
        """Whether the configured database is SQLite."""
        return self.url.startswith("sqlite")

    @computed_field
    @property
    def is_memory(self) -> bool:
        """Whether the configured database lives only in memory."""
        return self.is_sqlite and (":memory:" in self.url or self.url == "sqlite://")


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="plain", description="Log format")
    file: str | None = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class ValidationPolicy(BaseModel):
    """Rules applied to users at the validation boundary."""

    name_min_length: int = Field(
        default=2, ge=1, description="Minimum length of first and last names"
    )
    password_min_length: int = Field(
        default=8, ge=1, description="Minimum password length"
    )
    email_pattern: str = Field(
        default=r"^[^@\s]+@[^@\s]+\.[^@\s]+$",
        description="Pattern an email address must match",
    )
    require_password_confirmation: bool = Field(
        default=True,
        description="Report a violation when the confirmation differs from the password",
    )


class ConfigData(BaseModel):
    """Root configuration model."""

    app: AppConfig = Field(default_factory=AppConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    validation: ValidationPolicy = Field(default_factory=ValidationPolicy)

    def warn_on_unsafe_settings(self) -> None:
        """Log warnings for settings that are acceptable only outside production."""
        if self.app.environment != "production":
            return
        if self.database.is_sqlite:
            logger.warning(
                "SQLite is not recommended for production use. "
                "Consider PostgreSQL for better performance and reliability."
            )
        if self.database.echo:
            logger.warning("SQL echo is enabled in production")
