"""
Remote Fetch Configuration.

HTTP settings shared by every request the resource fetcher makes. There is
no retry policy: a failed request surfaces to the caller immediately.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .types import PositiveFloat, PositiveInt


class FetchConfig(BaseModel):
    """
    HTTP request policy for the resource fetcher.

    Attributes:
        timeout: Connect/read timeout in seconds for a single request.
        chunk_size: Streaming chunk size in bytes for binary downloads.
        user_agent: Value of the ``User-Agent`` header.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    timeout: PositiveFloat = Field(default=60.0, description="Request timeout (seconds)")
    chunk_size: PositiveInt = Field(default=8192, description="Streaming chunk size (bytes)")
    user_agent: str = Field(default="Wget/1.0", min_length=1)

    @model_validator(mode="before")
    @classmethod
    def handle_empty_config(cls, data: Any) -> Any:
        """Treat an empty YAML section (``fetch:``) as all defaults."""
        if data is None:
            return {}
        return data

    @property
    def headers(self) -> dict[str, str]:
        """Request headers sent with every fetch."""
        return {
            "User-Agent": self.user_agent,
            "Accept-Encoding": "identity",
        }
