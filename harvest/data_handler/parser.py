"""
Delimited Text Parser

Turns the lines of a delimited text resource into column names and an
ordered tuple of Records, according to a DatasetSpec. Splitting is literal
on the delimiter string: quoting is not understood.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..exceptions import EmptyContent, FieldCountMismatch, HeaderOnlyContent, NumericParseError
from .dataset import DatasetSpec, Record

# Plain ASCII decimal or exponent literal; no digit separators, no hex.
_FLOAT_RE = re.compile(
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?(?:nan|inf|infinity)",
    re.ASCII | re.IGNORECASE,
)


@dataclass(frozen=True)
class ParsedTable:
    """Column names and records parsed from one resource."""

    column_names: tuple[str, ...]
    records: tuple[Record, ...]


def column_names(lines: Sequence[str], spec: DatasetSpec) -> tuple[str, ...]:
    """
    Header fields when ``spec.has_header`` is set, synthesized names otherwise.

    Header names are not checked against ``spec.width``.
    """
    if spec.has_header:
        return tuple(lines[0].split(spec.delimiter))
    return spec.synthesized_column_names()


def _parse_vector(
    fields: Sequence[str], line_number: int | None, line: str
) -> np.ndarray:
    values = np.empty(len(fields), dtype=np.float32)
    for i, field in enumerate(fields):
        if not _FLOAT_RE.fullmatch(field.strip()):
            raise NumericParseError(field, line_number, line)
        values[i] = float(field)
    return values


def parse_record(line: str, spec: DatasetSpec, line_number: int | None = None) -> Record:
    """
    Parses one data line into a Record.

    Args:
        line: Raw data line (no terminator).
        spec: Shape and delimiter of the source.
        line_number: 1-based position in the source, for error messages.

    Raises:
        FieldCountMismatch: If the line does not have exactly ``spec.width`` fields.
        NumericParseError: If any field is not a floating point literal.
    """
    fields = line.split(spec.delimiter)
    if len(fields) != spec.width:
        raise FieldCountMismatch(spec.width, len(fields), line_number)

    inputs = _parse_vector(fields[: spec.input_count], line_number, line)
    outputs = _parse_vector(fields[spec.input_count :], line_number, line)
    return Record(inputs=inputs, outputs=outputs)


def parse_content(lines: Sequence[str], spec: DatasetSpec) -> ParsedTable:
    """
    Parses a whole resource.

    Blank body lines are skipped: empty, or whitespace-only with no
    delimiter in them. A line of delimiters alone (``"\t\t"`` for a tab
    separated source) is a row of empty fields and fails like one. Any
    other bad line aborts the parse; no partial table is returned.

    Args:
        lines: Source lines in order, as returned by ``fetch_lines``.
        spec: Shape, delimiter and header flag.

    Raises:
        EmptyContent: If there are no lines.
        HeaderOnlyContent: If a header is expected and no line follows it.
        FieldCountMismatch: See ``parse_record``.
        NumericParseError: See ``parse_record``.
    """
    if not lines:
        raise EmptyContent()
    if spec.has_header and len(lines) <= 1:
        raise HeaderOnlyContent()

    names = column_names(lines, spec)
    first_body = 1 if spec.has_header else 0

    records = tuple(
        parse_record(line, spec, line_number=idx + 1)
        for idx, line in enumerate(lines)
        if idx >= first_body and not _is_blank(line, spec.delimiter)
    )
    return ParsedTable(column_names=names, records=records)


def _is_blank(line: str, delimiter: str) -> bool:
    return not line.strip() and delimiter not in line
