"""
Harvest: example dataset acquisition for learning pipelines.

Top-level convenience API re-exporting the most commonly used components:

    from harvest import DatasetSpec, load, ArchiveStager
"""

from importlib.metadata import version as _pkg_version

__version__ = _pkg_version("harvest-datasets")

from .core import FetchConfig, HarvestConfig, Logger, LogStyle, StagingConfig
from .data_handler import (
    ArchiveStager,
    Dataset,
    DatasetSpec,
    Record,
    get_iris_classification_dataset,
    get_mnist_testing_dataset,
    get_mnist_training_dataset,
    get_sonar_dataset,
    get_swedish_auto_insurance_dataset,
    load,
    load_preset,
    stage_preset,
)
from .exceptions import HarvestError

__all__ = [
    "__version__",
    # Core
    "FetchConfig",
    "HarvestConfig",
    "Logger",
    "LogStyle",
    "StagingConfig",
    # Data
    "ArchiveStager",
    "Dataset",
    "DatasetSpec",
    "Record",
    "load",
    "load_preset",
    "stage_preset",
    # Presets
    "get_iris_classification_dataset",
    "get_mnist_testing_dataset",
    "get_mnist_training_dataset",
    "get_sonar_dataset",
    "get_swedish_auto_insurance_dataset",
    # Errors
    "HarvestError",
]
