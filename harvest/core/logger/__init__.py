"""
Logging Package.

- Logger: Stream and rotating-file logging initialization.
- LogStyle: Unified logging style constants.
"""

from .logger import ColorFormatter, Logger
from .styles import LogStyle

__all__ = [
    "ColorFormatter",
    "Logger",
    "LogStyle",
]
