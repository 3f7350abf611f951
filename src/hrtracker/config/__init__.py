"""Configuration file loading."""

from __future__ import annotations

from pathlib import Path

import yaml

from ..schemas.config import AppConfig, load_config


class ConfigManager:
    """YAML-backed configuration loader."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def load(self) -> AppConfig:
        """Parse the YAML file and validate it; a missing file yields defaults."""
        if not self._path.exists():
            return AppConfig()
        with self._path.open("r", encoding="utf-8") as handle:
            raw = yaml.safe_load(handle)
        if raw is not None and not isinstance(raw, dict):
            raise ValueError(f"Config file must be a YAML mapping: {self._path}")
        return load_config(raw)


__all__ = ["ConfigManager"]
