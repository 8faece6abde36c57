"""Configuration models.

This module defines the pydantic models persisted in config.json.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from todopad.models.core import TaskFilter


class StorageConfig(BaseModel):
    """Storage backend configuration."""

    backend: Literal["sqlite", "memory"] = Field(
        default="sqlite", description="Where tasks are persisted"
    )
    path: str | None = Field(
        default=None, description="Database path (sqlite only, default in data dir)"
    )

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str | None) -> str | None:
        """Treat blank paths as unset."""
        if v is None or not v.strip():
            return None
        return v.strip()


class OutputConfig(BaseModel):
    """Output configuration."""

    format: Literal["pretty", "table", "json", "yaml"] = Field(default="pretty")
    color: bool = Field(default=True)
    compact: bool = Field(default=False)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")


class AppConfig(BaseModel):
    """Main todopad configuration"""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    default_filter: TaskFilter = Field(default=TaskFilter.PENDING)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
