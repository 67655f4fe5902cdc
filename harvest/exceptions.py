"""
Harvest Exception Hierarchy.

HarvestError (base, Exception)
├── HarvestConfigError(HarvestError, ValueError)     ← config / spec validation
├── ResourceError(HarvestError)                      ← remote resource access
│   ├── MalformedResourceAddress(ResourceError, ValueError)
│   └── ResourceUnavailable(ResourceError)
├── ParseError(HarvestError, ValueError)             ← delimited text parsing
│   ├── EmptyContent
│   ├── HeaderOnlyContent
│   ├── FieldCountMismatch
│   └── NumericParseError
├── HarvestDatasetError(HarvestError)                ← dataset shape violations
└── StagingError(HarvestError)                       ← archive download/extract
    ├── DirectoryCreationFailed
    ├── DownloadFailed
    ├── UnsafeArchiveEntry
    └── CorruptArchive

Config and parse errors multi-inherit from ValueError so that callers
with plain ``except ValueError`` blocks keep working.
"""

from __future__ import annotations

from pathlib import Path


class HarvestError(Exception):
    """Base exception for all Harvest errors."""


class HarvestConfigError(HarvestError, ValueError):
    """Configuration or dataset spec validation error."""


class HarvestDatasetError(HarvestError):
    """A dataset was built from records that do not match its shape."""


# RESOURCE ACCESS
class ResourceError(HarvestError):
    """Base class for failures while addressing or opening a remote resource."""


class MalformedResourceAddress(ResourceError, ValueError):
    """URL is unparsable, lacks a host, or uses an unsupported scheme."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Malformed resource address {url!r}: {reason}")


class ResourceUnavailable(ResourceError):
    """Network or HTTP failure while fetching a resource."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Resource unavailable {url!r}: {reason}")


# PARSING
class ParseError(HarvestError, ValueError):
    """Base class for delimited text parsing failures."""


class EmptyContent(ParseError):
    """The resource contained no lines at all."""

    def __init__(self) -> None:
        super().__init__("content has no lines")


class HeaderOnlyContent(ParseError):
    """A header was expected but no data rows follow it."""

    def __init__(self) -> None:
        super().__init__("content has only a header line and no data rows")


class FieldCountMismatch(ParseError):
    """A data line has the wrong number of fields."""

    def __init__(self, expected: int, actual: int, line_number: int | None = None) -> None:
        self.expected = expected
        self.actual = actual
        self.line_number = line_number
        where = f" on line {line_number}" if line_number is not None else ""
        super().__init__(f"Wrong number of values{where}: found {actual}, expected {expected}")


class NumericParseError(ParseError):
    """A field is not a valid floating point literal."""

    def __init__(self, value: str, line_number: int | None = None, line: str | None = None) -> None:
        self.value = value
        self.line_number = line_number
        self.line = line
        where = f" on line {line_number}" if line_number is not None else ""
        context = f" ({line!r})" if line is not None else ""
        super().__init__(f"Number expected{where}, got {value!r}{context}")


# STAGING
class StagingError(HarvestError):
    """Base class for archive staging failures."""


class DirectoryCreationFailed(StagingError):
    """The destination directory could not be created."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Couldn't create destination directory: {path}")


class DownloadFailed(StagingError):
    """Transfer of the archive to the local scratch file failed."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Download of {url!r} failed: {reason}")


class UnsafeArchiveEntry(StagingError):
    """An archive entry would be written outside the destination directory."""

    def __init__(self, name: str, destination: Path) -> None:
        self.name = name
        self.destination = destination
        super().__init__(f"Archive entry {name!r} escapes destination {destination}")


class CorruptArchive(StagingError):
    """The downloaded archive cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Corrupt archive {path.name}: {reason}")
