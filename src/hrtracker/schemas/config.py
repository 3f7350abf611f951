"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class StorageConfig(BaseModel):
    path: str = "hrtracker.json"

    model_config = ConfigDict(extra="forbid")


class LoggingConfig(BaseModel):
    level: str = "INFO"

    model_config = ConfigDict(extra="forbid")


class DisplayConfig(BaseModel):
    default_sort: str | None = None

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    def to_settings(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


def load_config(raw: Any) -> AppConfig:
    """Validate a parsed YAML document; ``None`` yields the defaults."""
    if raw is None:
        return AppConfig()
    return AppConfig.model_validate(raw)
