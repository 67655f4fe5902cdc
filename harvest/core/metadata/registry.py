"""
Preset Registry.

Loads TabularPreset and ArchivePreset entries from ``presets.yaml`` and
provides validated lookups by name.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Final

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .base import ArchivePreset, TabularPreset

_YAML_PATH: Final[Path] = Path(__file__).parent / "presets.yaml"


def _load_manifest(path: Path) -> dict[str, Any]:
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    base_url = str(data.get("base_url", "")).rstrip("/")

    tabular = {}
    for name, info in (data.get("tabular") or {}).items():
        info = dict(info)
        file_name = info.pop("file", None)
        if "url" not in info:
            info["url"] = f"{base_url}/{file_name}"
        tabular[name] = TabularPreset(name=name, **info)

    archives = {
        name: ArchivePreset(name=name, **info) for name, info in (data.get("archives") or {}).items()
    }
    return {"tabular": tabular, "archives": archives}


class PresetRegistry(BaseModel):
    """
    Read-only registry of the bundled dataset presets.

    Attributes:
        tabular: Tabular presets by name.
        archives: Archive presets by name.
    """

    model_config = ConfigDict(frozen=True)

    tabular: dict[str, TabularPreset] = Field(default_factory=dict)
    archives: dict[str, ArchivePreset] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _check_unique_names(cls, values: Any) -> Any:
        if isinstance(values, dict):
            overlap = set(values.get("tabular") or {}) & set(values.get("archives") or {})
            if overlap:
                raise ValueError(f"Preset names used twice: {sorted(overlap)}")
        return values

    @classmethod
    def from_yaml(cls, path: Path = _YAML_PATH) -> "PresetRegistry":
        """Builds a registry from a presets manifest (defaults to the bundled one)."""
        return cls.model_validate(_load_manifest(path))

    @property
    def names(self) -> list[str]:
        return sorted([*self.tabular, *self.archives])

    def get_tabular(self, name: str) -> TabularPreset:
        """
        Raises:
            KeyError: If no tabular preset has this name.
        """
        if name not in self.tabular:
            raise KeyError(f"Tabular preset '{name}' not found. Available: {sorted(self.tabular)}")
        return self.tabular[name]

    def get_archive(self, name: str) -> ArchivePreset:
        """
        Raises:
            KeyError: If no archive preset has this name.
        """
        if name not in self.archives:
            raise KeyError(f"Archive preset '{name}' not found. Available: {sorted(self.archives)}")
        return self.archives[name]


PRESET_REGISTRY: Final[PresetRegistry] = PresetRegistry.from_yaml()
