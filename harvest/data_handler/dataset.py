"""
Tabular Dataset Model.

Defines the shape description of a delimited source (DatasetSpec), the
parsed (inputs, outputs) pair of a single line (Record), and the finished
in-memory collection handed to training code (Dataset). A Dataset is
built in one step from a complete record sequence and is never appended to.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..core.config import NonNegativeInt
from ..exceptions import HarvestDatasetError


# SPEC
class DatasetSpec(BaseModel):
    """
    Immutable format and shape of a delimited tabular source.

    Attributes:
        delimiter: Literal field separator (not a regex).
        input_count: Number of leading input columns.
        output_count: Number of trailing output columns.
        has_header: Whether the first line holds column names.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    delimiter: str = Field(..., min_length=1)
    input_count: NonNegativeInt
    output_count: NonNegativeInt
    has_header: bool = False

    @model_validator(mode="after")
    def _check_width(self) -> "DatasetSpec":
        if self.width == 0:
            raise ValueError("input_count + output_count must be greater than zero")
        return self

    @property
    def width(self) -> int:
        """Number of fields every data line must have."""
        return self.input_count + self.output_count

    def synthesized_column_names(self) -> tuple[str, ...]:
        """Column names ``in1..inK, out1..outM`` for header-less sources."""
        inputs = [f"in{i}" for i in range(1, self.input_count + 1)]
        outputs = [f"out{j}" for j in range(1, self.output_count + 1)]
        return tuple(inputs + outputs)


# RECORD
def _frozen_vector(values: Sequence[float] | np.ndarray) -> np.ndarray:
    arr = np.array(values, dtype=np.float32).reshape(-1)
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True)
class Record:
    """
    One parsed data line: an input vector and an output vector.

    Both vectors are read-only float32 arrays.
    """

    inputs: np.ndarray
    outputs: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "inputs", _frozen_vector(self.inputs))
        object.__setattr__(self, "outputs", _frozen_vector(self.outputs))

    @property
    def width(self) -> int:
        return int(self.inputs.size + self.outputs.size)


# DATASET
@dataclass(frozen=True)
class Dataset:
    """
    Ordered, immutable collection of records with column metadata.

    Every record must have exactly ``input_count`` inputs and
    ``output_count`` outputs. Column names are stored as given; a header
    whose width differs from the shape is not rejected here.
    """

    records: tuple[Record, ...]
    column_names: tuple[str, ...]
    input_count: int
    output_count: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "records", tuple(self.records))
        object.__setattr__(self, "column_names", tuple(self.column_names))

        for idx, record in enumerate(self.records):
            if record.inputs.size != self.input_count or record.outputs.size != self.output_count:
                raise HarvestDatasetError(
                    f"Record {idx} has shape ({record.inputs.size}, {record.outputs.size}), "
                    f"dataset expects ({self.input_count}, {self.output_count})"
                )

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __getitem__(self, idx: int) -> Record:
        return self.records[idx]

    @property
    def inputs(self) -> np.ndarray:
        """Input matrix of shape (N, input_count)."""
        if not self.records:
            return np.empty((0, self.input_count), dtype=np.float32)
        return np.stack([r.inputs for r in self.records])

    @property
    def outputs(self) -> np.ndarray:
        """Output matrix of shape (N, output_count)."""
        if not self.records:
            return np.empty((0, self.output_count), dtype=np.float32)
        return np.stack([r.outputs for r in self.records])

    def summary(self) -> str:
        """One-line description for reports and logs."""
        return (
            f"{len(self)} records | inputs: {self.input_count} | "
            f"outputs: {self.output_count} | columns: {', '.join(self.column_names)}"
        )
