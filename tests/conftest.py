"""
Shared fixtures: fake HTTP responses and in-memory ZIP archives.

No test in this suite opens a real network connection.
"""

from __future__ import annotations

import io
import zipfile
from typing import Iterator

import pytest
import requests


class FakeResponse:
    """Minimal stand-in for a streaming ``requests.Response``."""

    def __init__(
        self,
        body: bytes = b"",
        status_code: int = 200,
        headers: dict[str, str] | None = None,
        fail_after: int | None = None,
    ) -> None:
        self.body = body
        self.status_code = status_code
        self.headers = headers or {"Content-Type": "application/octet-stream"}
        self.fail_after = fail_after
        self.closed = False

    @property
    def content(self) -> bytes:
        if self.fail_after is not None:
            raise requests.ConnectionError("connection reset while reading body")
        return self.body

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error", response=self)

    def iter_content(self, chunk_size: int = 1) -> Iterator[bytes]:
        for offset in range(0, len(self.body), chunk_size):
            if self.fail_after is not None and offset >= self.fail_after:
                raise requests.ConnectionError("connection reset while streaming")
            yield self.body[offset : offset + chunk_size]

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> "FakeResponse":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


@pytest.fixture
def fake_get(monkeypatch):
    """
    Routes ``requests.get`` to a canned FakeResponse.

    Returns a function ``install(response_or_exception)``; the list of
    recorded calls is available as ``install.calls``.
    """

    def install(result):
        def _get(url, **kwargs):
            install.calls.append((url, kwargs))
            if isinstance(result, BaseException):
                raise result
            return result

        monkeypatch.setattr("harvest.data_handler.fetcher.requests.get", _get)
        return result

    install.calls = []
    return install


def make_zip(entries: dict[str, bytes | None]) -> bytes:
    """Builds a ZIP archive in memory; a ``None`` value marks a directory entry."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for name, data in entries.items():
            if data is None:
                zf.writestr(zipfile.ZipInfo(name if name.endswith("/") else name + "/"), b"")
            else:
                zf.writestr(name, data)
    return buffer.getvalue()


@pytest.fixture
def zip_bytes():
    """Exposes ``make_zip`` to tests."""
    return make_zip


@pytest.fixture
def fake_response():
    """The FakeResponse class, for building canned responses."""
    return FakeResponse
