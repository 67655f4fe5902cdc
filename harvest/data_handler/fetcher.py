"""
Remote Resource Fetcher

Opens exactly one HTTP(S) connection per call and hands back either the
decoded lines of a text resource or a streaming response for binary
resources. URLs are validated before any network activity; connection and
HTTP failures surface as ResourceUnavailable without retries.
"""

from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from typing import Iterator
from urllib.parse import urlsplit

import requests

from ..core.config import FetchConfig
from ..core.logger import LogStyle
from ..core.paths import LOGGER_NAME, SUPPORTED_SCHEMES
from ..exceptions import MalformedResourceAddress, ResourceUnavailable

logger = logging.getLogger(LOGGER_NAME)

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def validate_url(url: str) -> str:
    """
    Checks that *url* is a well-formed http(s) address.

    Args:
        url: Address to validate.

    Returns:
        The address, unchanged.

    Raises:
        MalformedResourceAddress: If the URL cannot be parsed, has an
            unsupported scheme, an invalid port, or has no host.
    """
    if not isinstance(url, str) or not url.strip():
        raise MalformedResourceAddress(str(url), "empty address")

    try:
        parts = urlsplit(url)
        host = parts.hostname
        parts.port  # raises on non-numeric or out-of-range ports
    except ValueError as e:
        raise MalformedResourceAddress(url, str(e)) from e

    if parts.scheme.lower() not in SUPPORTED_SCHEMES:
        supported = ", ".join(sorted(SUPPORTED_SCHEMES))
        raise MalformedResourceAddress(
            url, f"unsupported scheme {parts.scheme!r} (supported: {supported})"
        )
    if not host:
        raise MalformedResourceAddress(url, "missing host")

    return url


@contextmanager
def open_resource(url: str, config: FetchConfig | None = None) -> Iterator[requests.Response]:
    """
    Opens a streaming GET request and guarantees the response is closed.

    Args:
        url: http(s) address of the resource.
        config: Request policy (timeout, headers). Defaults to FetchConfig().

    Yields:
        The open, successful (2xx) response with an unread body.

    Raises:
        MalformedResourceAddress: If the URL is invalid.
        ResourceUnavailable: On connection errors, timeouts or non-2xx status.
    """
    cfg = config or FetchConfig()
    validate_url(url)

    try:
        response = requests.get(
            url, headers=cfg.headers, timeout=cfg.timeout, stream=True, allow_redirects=True
        )
    except requests.RequestException as e:
        raise ResourceUnavailable(url, str(e)) from e

    with response:
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise ResourceUnavailable(url, str(e)) from e
        yield response


def split_lines(text: str) -> list[str]:
    """
    Splits text on ``\\n``, ``\\r\\n`` or ``\\r``.

    A terminator at the very end does not produce an extra empty line, so
    ``""`` yields no lines and ``"a\\n"`` yields ``["a"]``.
    """
    lines = _LINE_BREAK_RE.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def fetch_lines(url: str, config: FetchConfig | None = None) -> list[str]:
    """
    Downloads a text resource and returns its lines in source order.

    The body is decoded as UTF-8; undecodable bytes are replaced.

    Raises:
        MalformedResourceAddress: If the URL is invalid.
        ResourceUnavailable: If the connection fails before or during the read.
    """
    logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} {'Fetching':<18}: {url}")

    with open_resource(url, config) as response:
        try:
            body = response.content
        except requests.RequestException as e:
            raise ResourceUnavailable(url, str(e)) from e

    lines = split_lines(body.decode("utf-8", errors="replace"))
    logger.debug(f"{LogStyle.INDENT}{LogStyle.ARROW} {'Lines':<18}: {len(lines)}")
    return lines


def iter_bytes(response: requests.Response, chunk_size: int = 8192) -> Iterator[bytes]:
    """Yields the non-empty body chunks of a streaming response."""
    for chunk in response.iter_content(chunk_size=chunk_size):
        if chunk:
            yield chunk
