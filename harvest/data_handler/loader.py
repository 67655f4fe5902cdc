"""
Tabular Record Loader

Fetches a delimited text resource and parses it into a Dataset in one step.
Fetch and parse errors propagate unchanged.
"""

from __future__ import annotations

import logging

from ..core.config import FetchConfig
from ..core.logger import LogStyle
from ..core.paths import LOGGER_NAME
from .dataset import Dataset, DatasetSpec
from .fetcher import fetch_lines
from .parser import parse_content

logger = logging.getLogger(LOGGER_NAME)


def load(url: str, spec: DatasetSpec, config: FetchConfig | None = None) -> Dataset:
    """
    Loads a remote delimited text resource as a Dataset.

    Args:
        url: http(s) address of the resource.
        spec: Delimiter, input/output counts and header flag.
        config: Request policy. Defaults to FetchConfig().

    Returns:
        Dataset with the parsed records and column names.
    """
    lines = fetch_lines(url, config)
    table = parse_content(lines, spec)

    dataset = Dataset(
        records=table.records,
        column_names=table.column_names,
        input_count=spec.input_count,
        output_count=spec.output_count,
    )
    logger.info(
        f"{LogStyle.INDENT}{LogStyle.SUCCESS} {'Loaded':<18}: "
        f"{len(dataset)} records ({spec.input_count} in / {spec.output_count} out)"
    )
    return dataset
