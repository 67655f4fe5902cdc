"""
Top-level Harvest Configuration.

Aggregates the fetch and staging policies plus the log level, and loads
them from an optional YAML file used by the command line. Library calls
take the individual models as arguments instead.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ...exceptions import HarvestConfigError
from .fetch_config import FetchConfig
from .staging_config import StagingConfig
from .types import LogLevel


class HarvestConfig(BaseModel):
    """
    Root configuration manifest.

    Attributes:
        fetch: HTTP request policy.
        staging: Archive staging policy.
        log_level: Logging verbosity.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    fetch: FetchConfig = Field(default_factory=FetchConfig)
    staging: StagingConfig = Field(default_factory=StagingConfig)
    log_level: LogLevel = Field(default="INFO")

    @model_validator(mode="before")
    @classmethod
    def handle_empty_config(cls, data: Any) -> Any:
        """Treat an empty YAML document as all defaults."""
        if data is None:
            return {}
        return data

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "HarvestConfig":
        """
        Build a configuration from a YAML file.

        Args:
            yaml_path: Path to the YAML document.

        Returns:
            Validated, frozen HarvestConfig.

        Raises:
            FileNotFoundError: If the file does not exist.
            HarvestConfigError: If the document is not a mapping or fails validation.
        """
        if not yaml_path.exists():
            raise FileNotFoundError(f"YAML configuration file not found at: {yaml_path}")

        with open(yaml_path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)

        if raw is not None and not isinstance(raw, dict):
            raise HarvestConfigError(f"{yaml_path.name}: top level must be a mapping")

        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            raise HarvestConfigError(f"Invalid configuration in {yaml_path.name}: {e}") from e
