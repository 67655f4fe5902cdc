"""
Core Utilities Package

Configuration models, logging, project constants and the dataset preset
registry shared by the fetch, parse and staging modules.
"""

# Configuration
from .config import FetchConfig, HarvestConfig, StagingConfig

# Logging
from .logger import Logger, LogStyle

# Dataset Presets
from .metadata import PRESET_REGISTRY, ArchivePreset, PresetRegistry, TabularPreset

# Constants & Paths
from .paths import DEFAULT_TMP_BASE, JUNK_PATTERNS, LOGGER_NAME, get_default_tmp_base

__all__ = [
    # Configuration
    "FetchConfig",
    "HarvestConfig",
    "StagingConfig",
    # Logging
    "Logger",
    "LogStyle",
    # Presets
    "PRESET_REGISTRY",
    "ArchivePreset",
    "PresetRegistry",
    "TabularPreset",
    # Paths
    "DEFAULT_TMP_BASE",
    "JUNK_PATTERNS",
    "LOGGER_NAME",
    "get_default_tmp_base",
]
