"""
Project-wide Constants and Default Locations.

Single source of truth for logger identity and the default staging base.

Module Attributes:
    LOGGER_NAME: Global logger identity used by all modules for log synchronization.
    TMP_BASE_DIRNAME: Folder created under the system temp dir for staged archives.
    DEFAULT_TMP_BASE: Absolute default base for staged archive datasets.
    JUNK_PATTERNS: Archive entry name fragments that are never extracted.
    SUPPORTED_SCHEMES: URL schemes accepted by the resource fetcher.
"""

import tempfile
from pathlib import Path
from typing import Final, FrozenSet, Tuple

# GLOBAL CONSTANTS
# Global logger identity used by all modules to ensure log synchronization
LOGGER_NAME: Final[str] = "Harvest"

# URL schemes the fetcher will open
SUPPORTED_SCHEMES: Final[FrozenSet[str]] = frozenset({"http", "https"})

# OS metadata emitted by macOS archivers
JUNK_PATTERNS: Final[Tuple[str, ...]] = (".DS_Store", "__MACOSX")


# STAGING LOCATIONS
TMP_BASE_DIRNAME: Final[str] = "visrec-datasets"


def get_default_tmp_base() -> Path:
    """
    Resolve the default staging base under the host temp directory.

    Returns:
        Absolute path ``<system tmp>/visrec-datasets``. Not created here.
    """
    return (Path(tempfile.gettempdir()) / TMP_BASE_DIRNAME).resolve()


DEFAULT_TMP_BASE: Final[Path] = get_default_tmp_base()
