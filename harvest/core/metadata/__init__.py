"""
Dataset Preset Package

Parameter tables for the bundled example datasets: URL and shape for
tabular sources, URL and staging subpath for archives.
"""

from .base import ArchivePreset, TabularPreset
from .registry import PRESET_REGISTRY, PresetRegistry

__all__ = [
    "ArchivePreset",
    "PRESET_REGISTRY",
    "PresetRegistry",
    "TabularPreset",
]
