"""
Archive Staging Configuration.

Declares where archive datasets are staged and which archive entries are
treated as OS junk. The base path is injected into the stager instead of
being read from process state, so tests can point it at a temp dir.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..paths import DEFAULT_TMP_BASE, JUNK_PATTERNS
from .types import ValidatedPath


class StagingConfig(BaseModel):
    """
    Filesystem policy for staged archive datasets.

    Attributes:
        tmp_base: Base directory; datasets land in ``<tmp_base>/<family>/<split>``.
        junk_patterns: Entry name fragments skipped during extraction.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    tmp_base: ValidatedPath = Field(default=DEFAULT_TMP_BASE)
    junk_patterns: tuple[str, ...] = Field(default=JUNK_PATTERNS)

    @model_validator(mode="before")
    @classmethod
    def handle_empty_config(cls, data: Any) -> Any:
        """Treat an empty YAML section (``staging:``) as all defaults."""
        if data is None:
            return {}
        return data
