"""
Archive Dataset Stager

Downloads a remote ZIP archive into a scratch file inside the destination
directory, extracts it in archive order and removes the scratch file.
OS junk entries (``.DS_Store``, ``__MACOSX``) are skipped and entries that
would land outside the destination are rejected.

A staging run moves through PENDING → DOWNLOADING → EXTRACTING → DONE, or
ends in FAILED from any earlier state. Files extracted before a failing
entry stay on disk.
"""

from __future__ import annotations

import atexit
import logging
import os
import shutil
import tempfile
import zipfile
import zlib
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path, PurePosixPath

import requests

from ..core.config import FetchConfig, StagingConfig
from ..core.logger import LogStyle
from ..core.paths import LOGGER_NAME
from ..exceptions import (
    CorruptArchive,
    DirectoryCreationFailed,
    DownloadFailed,
    UnsafeArchiveEntry,
)
from .fetcher import iter_bytes, open_resource, validate_url

logger = logging.getLogger(LOGGER_NAME)


# JOB STATE
class StagingState(str, Enum):
    PENDING = "pending"
    DOWNLOADING = "downloading"
    EXTRACTING = "extracting"
    DONE = "done"
    FAILED = "failed"


_TRANSITIONS: dict[StagingState, frozenset[StagingState]] = {
    StagingState.PENDING: frozenset({StagingState.DOWNLOADING, StagingState.FAILED}),
    StagingState.DOWNLOADING: frozenset({StagingState.EXTRACTING, StagingState.FAILED}),
    StagingState.EXTRACTING: frozenset({StagingState.DONE, StagingState.FAILED}),
    StagingState.DONE: frozenset(),
    StagingState.FAILED: frozenset(),
}


@dataclass
class ArchiveJob:
    """
    Lifecycle of a single staging request.

    Attributes:
        url: Archive source address.
        destination: Directory the archive is extracted into.
        state: Current StagingState.
        reason: Failure description once the job is FAILED.
    """

    url: str
    destination: Path
    state: StagingState = field(default=StagingState.PENDING)
    reason: str | None = None

    @property
    def is_terminal(self) -> bool:
        return self.state in (StagingState.DONE, StagingState.FAILED)

    def advance(self, new_state: StagingState) -> None:
        """Moves to *new_state*; raises RuntimeError for an illegal transition."""
        if new_state not in _TRANSITIONS[self.state]:
            raise RuntimeError(
                f"Illegal staging transition {self.state.value} -> {new_state.value}"
            )
        logger.debug(f"{LogStyle.INDENT}{LogStyle.ARROW} {'Staging state':<18}: {new_state.value}")
        self.state = new_state

    def fail(self, reason: str) -> None:
        self.advance(StagingState.FAILED)
        self.reason = reason


# STAGER
class ArchiveStager:
    """
    Materializes remote ZIP archives into local directories.

    Args:
        tmp_base: Base directory for ``stage_split``. Defaults to
            ``StagingConfig().tmp_base``.
        config: Staging policy (junk patterns, default base).
        fetch_config: Request policy for the download.
    """

    def __init__(
        self,
        tmp_base: Path | None = None,
        config: StagingConfig | None = None,
        fetch_config: FetchConfig | None = None,
    ) -> None:
        self.config = config or StagingConfig()
        self.fetch_config = fetch_config or FetchConfig()
        self.tmp_base = Path(tmp_base) if tmp_base is not None else self.config.tmp_base

    def split_dir(self, family: str, split: str) -> Path:
        """Directory ``<tmp_base>/<family>/<split>`` for one dataset split."""
        return self.tmp_base / family / split

    def stage_split(self, url: str, family: str, split: str) -> Path:
        """Stages *url* into ``<tmp_base>/<family>/<split>`` and returns that path."""
        return self.stage(url, self.split_dir(family, split))

    def stage(self, url: str, destination: Path) -> Path:
        """
        Downloads and extracts the archive at *url* into *destination*.

        Args:
            url: http(s) address of a ZIP archive.
            destination: Target directory; created with parents if missing.

        Returns:
            The destination directory, populated with the archive contents.

        Raises:
            DirectoryCreationFailed: If the destination cannot be created.
            MalformedResourceAddress: If the URL is invalid.
            ResourceUnavailable: If the connection cannot be opened.
            DownloadFailed: If the transfer to the scratch file fails.
            UnsafeArchiveEntry: If an entry would escape the destination.
            CorruptArchive: If the archive cannot be read.
        """
        job = ArchiveJob(url=url, destination=Path(destination))
        logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} {'Staging':<18}: {url}")

        try:
            validate_url(url)
            _ensure_directory(job.destination)

            job.advance(StagingState.DOWNLOADING)
            scratch = self._download(job)

            try:
                job.advance(StagingState.EXTRACTING)
                extracted = self._extract(scratch, job.destination)
            finally:
                _discard_scratch(scratch)

            job.advance(StagingState.DONE)
        except Exception as e:
            if not job.is_terminal:
                job.fail(str(e))
            raise

        logger.info(
            f"{LogStyle.INDENT}{LogStyle.SUCCESS} {'Staged':<18}: "
            f"{extracted} files → {job.destination}"
        )
        return job.destination

    def _download(self, job: ArchiveJob) -> Path:
        """Streams the archive into a unique scratch file inside the destination."""
        try:
            fd, name = tempfile.mkstemp(prefix=".harvest-", suffix=".zip", dir=job.destination)
        except OSError as e:
            raise DownloadFailed(job.url, f"cannot create scratch file: {e}") from e
        os.close(fd)
        scratch = Path(name)

        try:
            with open_resource(job.url, self.fetch_config) as response:
                content_type = response.headers.get("Content-Type", "")
                if "text/html" in content_type:
                    raise DownloadFailed(job.url, "server returned an HTML page, not an archive")

                with open(scratch, "wb") as f:
                    for chunk in iter_bytes(response, self.fetch_config.chunk_size):
                        f.write(chunk)
        except (requests.RequestException, OSError) as e:
            _discard_scratch(scratch)
            raise DownloadFailed(job.url, str(e)) from e
        except BaseException:
            _discard_scratch(scratch)
            raise

        return scratch

    def _extract(self, archive: Path, destination: Path) -> int:
        """Extracts *archive* into *destination*; returns the number of files written."""
        root = destination.resolve()
        written = 0

        try:
            with zipfile.ZipFile(archive) as zf:
                for info in zf.infolist():
                    name = info.filename

                    if self._is_junk(name):
                        logger.debug(f"{LogStyle.INDENT}{LogStyle.ARROW} {'Skipped':<18}: {name}")
                        continue

                    target = _safe_target(root, name)

                    if info.is_dir():
                        target.mkdir(parents=True, exist_ok=True)
                        continue

                    target.parent.mkdir(parents=True, exist_ok=True)
                    with zf.open(info) as src, open(target, "wb") as dst:
                        shutil.copyfileobj(src, dst, self.fetch_config.chunk_size)
                    written += 1
        except (zipfile.BadZipFile, zlib.error, EOFError, NotImplementedError, RuntimeError) as e:
            raise CorruptArchive(archive, str(e)) from e

        return written

    def _is_junk(self, name: str) -> bool:
        return any(pattern in name for pattern in self.config.junk_patterns)


# HELPERS
def _ensure_directory(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        if not path.is_dir():
            raise DirectoryCreationFailed(path) from e


def _safe_target(root: Path, name: str) -> Path:
    """
    Resolves an entry name under *root*.

    Rejects names with ``..`` segments and anything that resolves outside
    *root* (absolute paths, drive letters, symlinked parents).
    """
    parts = PurePosixPath(name.replace("\\", "/")).parts
    if ".." in parts:
        raise UnsafeArchiveEntry(name, root)

    target = (root / name).resolve()
    if target != root and not target.is_relative_to(root):
        raise UnsafeArchiveEntry(name, root)
    return target


def _discard_scratch(path: Path) -> None:
    """Deletes the scratch archive, deferring to interpreter exit if that fails."""
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning(f"Could not delete {path} ({e}); deleting at exit")
        atexit.register(_delete_at_exit, path)


def _delete_at_exit(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning(f"Scratch archive left behind: {path} ({e})")
