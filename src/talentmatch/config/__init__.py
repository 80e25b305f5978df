"""Configuration file loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


class ConfigManager:
    """YAML-backed configuration loader rooted at a config directory."""

    def __init__(self, base_path: str | Path):
        self._base_path = Path(base_path)

    def load(self, name: str) -> dict[str, Any]:
        """Load ``<name>.yaml`` from the base directory."""
        return self.read(self._base_path / f"{name}.yaml")

    @staticmethod
    def read(path: str | Path) -> dict[str, Any]:
        """Load a YAML file; an empty file yields an empty mapping."""
        with Path(path).open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle)
        if loaded is None:
            return {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file must be a YAML mapping: {path}")
        return loaded


__all__ = ["ConfigManager"]
