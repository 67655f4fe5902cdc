"""
Filesystem Constants Package.

Centralizes the logger identity and default locations used by the fetcher
and the archive stager:

- LOGGER_NAME: Unified logging identity
- DEFAULT_TMP_BASE: Default base path for staged archive datasets
- JUNK_PATTERNS: Archive entry fragments filtered during extraction

Example:
    >>> from harvest.core.paths import DEFAULT_TMP_BASE
    >>> print(DEFAULT_TMP_BASE)
    PosixPath('/tmp/visrec-datasets')
"""

from .constants import (
    DEFAULT_TMP_BASE,
    JUNK_PATTERNS,
    LOGGER_NAME,
    SUPPORTED_SCHEMES,
    TMP_BASE_DIRNAME,
    get_default_tmp_base,
)

__all__ = [
    "LOGGER_NAME",
    "DEFAULT_TMP_BASE",
    "TMP_BASE_DIRNAME",
    "JUNK_PATTERNS",
    "SUPPORTED_SCHEMES",
    "get_default_tmp_base",
]
