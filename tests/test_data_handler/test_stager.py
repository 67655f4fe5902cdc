"""
Pytest test suite for the archive stager.

Builds ZIP archives in memory and serves them through a patched
``requests.get``; covers junk filtering, path containment, corruption,
download failures and scratch file cleanup.
"""

import struct
import zipfile

import pytest
import requests

from harvest.core.config import FetchConfig, StagingConfig
from harvest.data_handler import stager as stager_module
from harvest.data_handler.stager import ArchiveJob, ArchiveStager, StagingState, _safe_target
from harvest.exceptions import (
    CorruptArchive,
    DirectoryCreationFailed,
    DownloadFailed,
    MalformedResourceAddress,
    ResourceUnavailable,
    UnsafeArchiveEntry,
)

URL = "https://example.com/images.zip"


@pytest.fixture
def destination(tmp_path):
    return tmp_path / "staged" / "mnist" / "testing"


@pytest.fixture
def stager(tmp_path):
    return ArchiveStager(tmp_base=tmp_path / "base", fetch_config=FetchConfig(chunk_size=16))


@pytest.fixture
def serve_zip(fake_get, fake_response, zip_bytes):
    """Serves an archive built from *entries* for the next request."""

    def _serve(entries, **kwargs):
        return fake_get(fake_response(zip_bytes(entries), **kwargs))

    return _serve


def _scratch_files(directory):
    return list(directory.glob(".harvest-*.zip"))


def _patch_central_header(data, offset, value):
    """Overwrites a 2-byte field of the first central directory header."""
    buf = bytearray(data)
    struct.pack_into("<H", buf, buf.index(b"PK\x01\x02") + offset, value)
    return bytes(buf)


# HAPPY PATH
@pytest.mark.unit
def test_stage_extracts_tree(stager, destination, serve_zip):
    serve_zip(
        {
            "images/": None,
            "images/0/1.png": b"\x89PNG one",
            "images/1/2.png": b"\x89PNG two",
            "labels.txt": b"0\n1\n",
        }
    )

    result = stager.stage(URL, destination)

    assert result == destination
    assert (destination / "images" / "0" / "1.png").read_bytes() == b"\x89PNG one"
    assert (destination / "images" / "1" / "2.png").read_bytes() == b"\x89PNG two"
    assert (destination / "labels.txt").read_text() == "0\n1\n"
    assert _scratch_files(destination) == []


@pytest.mark.unit
def test_stage_creates_empty_directories(stager, destination, serve_zip):
    serve_zip({"empty/nested/": None})

    stager.stage(URL, destination)

    assert (destination / "empty" / "nested").is_dir()


@pytest.mark.unit
def test_stage_overwrites_existing_files(stager, destination, serve_zip):
    destination.mkdir(parents=True)
    (destination / "a.txt").write_text("old contents that are longer")
    serve_zip({"a.txt": b"new"})

    stager.stage(URL, destination)

    assert (destination / "a.txt").read_bytes() == b"new"


@pytest.mark.unit
def test_stage_skips_junk_entries(stager, destination, serve_zip):
    serve_zip(
        {
            "images/0/1.png": b"png",
            "__MACOSX/": None,
            "__MACOSX/images/._1.png": b"resource fork",
            "images/.DS_Store": b"finder",
        }
    )

    stager.stage(URL, destination)

    assert not (destination / "__MACOSX").exists()
    assert not (destination / "images" / ".DS_Store").exists()
    assert (destination / "images" / "0" / "1.png").exists()


@pytest.mark.unit
def test_custom_junk_patterns(tmp_path, destination, serve_zip):
    stager = ArchiveStager(config=StagingConfig(tmp_base=tmp_path, junk_patterns=("Thumbs.db",)))
    serve_zip({"Thumbs.db": b"x", ".DS_Store": b"y"})

    stager.stage(URL, destination)

    assert not (destination / "Thumbs.db").exists()
    assert (destination / ".DS_Store").exists()


@pytest.mark.unit
def test_stage_split_uses_family_and_split(tmp_path, stager, serve_zip):
    serve_zip({"x.png": b"x"})

    result = stager.stage_split(URL, "mnist", "training")

    assert result == tmp_path / "base" / "mnist" / "training"
    assert (result / "x.png").exists()


@pytest.mark.unit
def test_default_tmp_base_comes_from_config(tmp_path):
    stager = ArchiveStager(config=StagingConfig(tmp_base=tmp_path))

    assert stager.split_dir("mnist", "testing") == tmp_path / "mnist" / "testing"


# PATH SAFETY
@pytest.mark.unit
def test_traversal_entry_rejected_after_earlier_entries(tmp_path, stager, serve_zip):
    destination = tmp_path / "dest"
    serve_zip(
        {
            "images/0/1.png": b"png",
            "__MACOSX/._1.png": b"junk",
            "../evil.txt": b"pwned",
        }
    )

    with pytest.raises(UnsafeArchiveEntry) as exc_info:
        stager.stage(URL, destination)

    assert exc_info.value.name == "../evil.txt"
    assert not (tmp_path / "evil.txt").exists()
    assert (destination / "images" / "0" / "1.png").exists()
    assert not (destination / "__MACOSX").exists()
    assert _scratch_files(destination) == []


@pytest.mark.unit
@pytest.mark.parametrize(
    "name",
    ["../../outside.txt", "images/../../outside.txt", "a/../b.txt", "..\\win.txt", "/abs/evil.txt"],
)
def test_unsafe_names_never_written(tmp_path, stager, serve_zip, name):
    destination = tmp_path / "dest"
    serve_zip({name: b"payload"})

    with pytest.raises(UnsafeArchiveEntry):
        stager.stage(URL, destination)

    assert [p for p in destination.rglob("*") if p.is_file()] == []


@pytest.mark.unit
def test_safe_target_resolves_inside_root(tmp_path):
    root = tmp_path.resolve()

    assert _safe_target(root, "a/b/c.png") == root / "a" / "b" / "c.png"
    assert _safe_target(root, "./") == root


# FAILURES
@pytest.mark.unit
def test_corrupt_archive(stager, destination, fake_get, fake_response):
    fake_get(fake_response(b"this is not a zip file"))

    with pytest.raises(CorruptArchive):
        stager.stage(URL, destination)

    assert _scratch_files(destination) == []


@pytest.mark.unit
def test_truncated_archive(stager, destination, fake_get, fake_response, zip_bytes):
    data = zip_bytes({"big.bin": b"0123456789" * 1000})
    fake_get(fake_response(data[: len(data) // 2]))

    with pytest.raises(CorruptArchive):
        stager.stage(URL, destination)


@pytest.mark.unit
def test_unsupported_compression_method(stager, destination, fake_get, fake_response, zip_bytes):
    data = _patch_central_header(zip_bytes({"a.png": b"a" * 64}), 10, 99)
    fake_get(fake_response(data))

    with pytest.raises(CorruptArchive) as exc_info:
        stager.stage(URL, destination)

    assert isinstance(exc_info.value.__cause__, NotImplementedError)
    assert not (destination / "a.png").exists()
    assert _scratch_files(destination) == []


@pytest.mark.unit
def test_encrypted_entry(stager, destination, fake_get, fake_response, zip_bytes):
    data = _patch_central_header(zip_bytes({"a.png": b"a" * 64}), 8, 0x1)
    fake_get(fake_response(data))

    with pytest.raises(CorruptArchive) as exc_info:
        stager.stage(URL, destination)

    assert isinstance(exc_info.value.__cause__, RuntimeError)
    assert _scratch_files(destination) == []


@pytest.mark.unit
def test_scratch_file_creation_failure(stager, destination, serve_zip, monkeypatch):
    serve_zip({"a.png": b"a"})

    def _refuse(*args, **kwargs):
        raise PermissionError("read-only filesystem")

    monkeypatch.setattr(stager_module.tempfile, "mkstemp", _refuse)

    with pytest.raises(DownloadFailed, match="scratch") as exc_info:
        stager.stage(URL, destination)

    assert isinstance(exc_info.value.__cause__, PermissionError)


@pytest.mark.unit
def test_interrupted_download(stager, destination, fake_get, fake_response, zip_bytes):
    fake_get(fake_response(zip_bytes({"a.png": b"a" * 500}), fail_after=32))

    with pytest.raises(DownloadFailed) as exc_info:
        stager.stage(URL, destination)

    assert isinstance(exc_info.value.__cause__, requests.ConnectionError)
    assert _scratch_files(destination) == []


@pytest.mark.unit
def test_html_page_is_not_an_archive(stager, destination, fake_get, fake_response):
    fake_get(fake_response(b"<html>sign in</html>", headers={"Content-Type": "text/html"}))

    with pytest.raises(DownloadFailed, match="HTML"):
        stager.stage(URL, destination)

    assert _scratch_files(destination) == []


@pytest.mark.unit
def test_connection_failure_propagates(stager, destination, fake_get):
    fake_get(requests.ConnectionError("no route to host"))

    with pytest.raises(ResourceUnavailable):
        stager.stage(URL, destination)

    assert _scratch_files(destination) == []


@pytest.mark.unit
def test_malformed_url_fails_before_touching_disk(stager, destination, fake_get):
    with pytest.raises(MalformedResourceAddress):
        stager.stage("not a url", destination)

    assert fake_get.calls == []
    assert not destination.exists()


@pytest.mark.unit
def test_destination_is_a_file(tmp_path, stager, serve_zip):
    blocker = tmp_path / "blocker"
    blocker.write_text("I am a file")
    serve_zip({"a.png": b"a"})

    with pytest.raises(DirectoryCreationFailed) as exc_info:
        stager.stage(URL, blocker)

    assert exc_info.value.path == blocker


# SCRATCH CLEANUP
@pytest.mark.unit
def test_failed_delete_is_deferred_to_exit(tmp_path, monkeypatch):
    scratch = tmp_path / ".harvest-stuck.zip"
    scratch.write_bytes(b"PK")
    registered = []

    def refuse(self, missing_ok=False):
        raise PermissionError("file in use")

    monkeypatch.setattr(stager_module.Path, "unlink", refuse)
    monkeypatch.setattr(stager_module.atexit, "register", lambda fn, *args: registered.append(args))

    stager_module._discard_scratch(scratch)

    assert registered == [(scratch,)]


# JOB STATE MACHINE
@pytest.mark.unit
def test_job_happy_path(tmp_path):
    job = ArchiveJob(url=URL, destination=tmp_path)

    for state in (StagingState.DOWNLOADING, StagingState.EXTRACTING, StagingState.DONE):
        job.advance(state)

    assert job.state is StagingState.DONE
    assert job.is_terminal


@pytest.mark.unit
@pytest.mark.parametrize(
    "path",
    [
        (),
        (StagingState.DOWNLOADING,),
        (StagingState.DOWNLOADING, StagingState.EXTRACTING),
    ],
)
def test_job_can_fail_from_any_non_terminal_state(tmp_path, path):
    job = ArchiveJob(url=URL, destination=tmp_path)
    for state in path:
        job.advance(state)

    job.fail("boom")

    assert job.state is StagingState.FAILED
    assert job.reason == "boom"


@pytest.mark.unit
def test_job_rejects_illegal_transitions(tmp_path):
    job = ArchiveJob(url=URL, destination=tmp_path)

    with pytest.raises(RuntimeError):
        job.advance(StagingState.EXTRACTING)

    job.advance(StagingState.DOWNLOADING)
    job.advance(StagingState.EXTRACTING)
    job.advance(StagingState.DONE)

    with pytest.raises(RuntimeError):
        job.fail("too late")


@pytest.mark.unit
def test_zip_entries_written_in_archive_order(stager, destination, serve_zip, monkeypatch):
    serve_zip({"b.txt": b"b", "a.txt": b"a", "c/d.txt": b"d"})
    opened = []
    real_open = zipfile.ZipFile.open

    def recording_open(self, name, *args, **kwargs):
        opened.append(getattr(name, "filename", name))
        return real_open(self, name, *args, **kwargs)

    monkeypatch.setattr(zipfile.ZipFile, "open", recording_open)

    stager.stage(URL, destination)

    assert opened == ["b.txt", "a.txt", "c/d.txt"]
