"""
Dataset Preset Definitions.

Preset schemas are frozen pydantic models: a tabular preset pairs a URL
with a DatasetSpec, an archive preset pairs a URL with the
``<family>/<split>`` subpath it is staged into.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..config import NonNegativeInt


class TabularPreset(BaseModel):
    """
    Immutable parameter row for a delimited text dataset.

    Attributes:
        name: Short identifier (e.g., ``'iris'``).
        display_name: Human-readable name for reporting.
        url: Source URL of the text resource.
        delimiter: Literal field separator.
        input_count: Number of input columns.
        output_count: Number of output columns.
        has_header: Whether the first line holds column names.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1)
    display_name: str
    url: str
    delimiter: str = Field(..., min_length=1)
    input_count: NonNegativeInt
    output_count: NonNegativeInt
    has_header: bool = False

    def __repr__(self) -> str:
        return (
            f"<TabularPreset: {self.display_name} "
            f"({self.input_count} in / {self.output_count} out)>"
        )


class ArchivePreset(BaseModel):
    """
    Immutable parameter row for a ZIP archive dataset.

    Attributes:
        name: Short identifier (e.g., ``'mnist_training'``).
        display_name: Human-readable name for reporting.
        url: Source URL of the archive.
        family: Dataset family directory (e.g., ``'mnist'``).
        split: Split directory inside the family (e.g., ``'training'``).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1)
    display_name: str
    url: str
    family: str = Field(..., pattern=r"^[A-Za-z0-9_.-]+$")
    split: str = Field(..., pattern=r"^[A-Za-z0-9_.-]+$")

    def __repr__(self) -> str:
        return f"<ArchivePreset: {self.display_name} ({self.family}/{self.split})>"
