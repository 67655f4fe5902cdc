"""
Data Handler Package

Fetches example datasets from remote sources: delimited text resources are
parsed into in-memory Datasets, ZIP archives are staged into local
directory trees.
"""

from .dataset import Dataset, DatasetSpec, Record
from .fetcher import fetch_lines, iter_bytes, open_resource, split_lines, validate_url
from .loader import load
from .parser import ParsedTable, column_names, parse_content, parse_record
from .presets import (
    get_iris_classification_dataset,
    get_mnist_testing_dataset,
    get_mnist_training_dataset,
    get_sonar_dataset,
    get_swedish_auto_insurance_dataset,
    load_preset,
    spec_for,
    stage_preset,
)
from .stager import ArchiveJob, ArchiveStager, StagingState

__all__ = [
    # Model
    "Dataset",
    "DatasetSpec",
    "Record",
    # Fetching
    "fetch_lines",
    "iter_bytes",
    "open_resource",
    "split_lines",
    "validate_url",
    # Parsing & loading
    "ParsedTable",
    "column_names",
    "parse_content",
    "parse_record",
    "load",
    # Staging
    "ArchiveJob",
    "ArchiveStager",
    "StagingState",
    # Presets
    "get_iris_classification_dataset",
    "get_mnist_testing_dataset",
    "get_mnist_training_dataset",
    "get_sonar_dataset",
    "get_swedish_auto_insurance_dataset",
    "load_preset",
    "spec_for",
    "stage_preset",
]
