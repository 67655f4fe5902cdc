"""
Example Dataset Entry Points.

Thin wrappers that look up a bundled preset and hand it to the record
loader or the archive stager.
"""

from __future__ import annotations

from pathlib import Path

from ..core.config import FetchConfig, StagingConfig
from ..core.metadata import PRESET_REGISTRY, PresetRegistry, TabularPreset
from .dataset import Dataset, DatasetSpec
from .loader import load
from .stager import ArchiveStager


def spec_for(preset: TabularPreset) -> DatasetSpec:
    """DatasetSpec described by a tabular preset."""
    return DatasetSpec(
        delimiter=preset.delimiter,
        input_count=preset.input_count,
        output_count=preset.output_count,
        has_header=preset.has_header,
    )


def load_preset(
    name: str,
    config: FetchConfig | None = None,
    registry: PresetRegistry = PRESET_REGISTRY,
) -> Dataset:
    """Loads the tabular preset *name* as a Dataset."""
    preset = registry.get_tabular(name)
    return load(preset.url, spec_for(preset), config)


def stage_preset(
    name: str,
    tmp_base: Path | None = None,
    staging_config: StagingConfig | None = None,
    fetch_config: FetchConfig | None = None,
    registry: PresetRegistry = PRESET_REGISTRY,
) -> Path:
    """Stages the archive preset *name* under ``<tmp_base>/<family>/<split>``."""
    preset = registry.get_archive(name)
    stager = ArchiveStager(tmp_base=tmp_base, config=staging_config, fetch_config=fetch_config)
    return stager.stage_split(preset.url, preset.family, preset.split)


# TABULAR
def get_sonar_dataset(config: FetchConfig | None = None) -> Dataset:
    """Sonar returns: 60 inputs, 1 output, no header."""
    return load_preset("sonar", config)


def get_iris_classification_dataset(config: FetchConfig | None = None) -> Dataset:
    """Normalised Iris: 4 inputs, 3 one-hot outputs, header line."""
    return load_preset("iris", config)


def get_swedish_auto_insurance_dataset(config: FetchConfig | None = None) -> Dataset:
    """Swedish auto insurance claims: 1 input, 1 output, no header."""
    return load_preset("swedish_auto_insurance", config)


# ARCHIVES
def get_mnist_training_dataset(tmp_base: Path | None = None) -> Path:
    """MNIST training PNGs staged under ``<tmp_base>/mnist/training``."""
    return stage_preset("mnist_training", tmp_base)


def get_mnist_testing_dataset(tmp_base: Path | None = None) -> Path:
    """MNIST testing PNGs staged under ``<tmp_base>/mnist/testing``."""
    return stage_preset("mnist_testing", tmp_base)
