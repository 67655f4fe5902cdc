"""
Configuration Package.

Flat public API for the frozen pydantic configuration models:

- FetchConfig: HTTP timeout, chunk size, headers
- StagingConfig: staging base path and junk entry patterns
- HarvestConfig: root manifest, loadable from YAML
"""

from .fetch_config import FetchConfig
from .manifest import HarvestConfig
from .staging_config import StagingConfig
from .types import LogLevel, NonNegativeInt, PositiveFloat, PositiveInt, ValidatedPath

__all__ = [
    "FetchConfig",
    "HarvestConfig",
    "StagingConfig",
    "LogLevel",
    "NonNegativeInt",
    "PositiveFloat",
    "PositiveInt",
    "ValidatedPath",
]
