"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, pdfmult.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from pdfmult.domain.layout import SUPPORTED_COPIES
from pdfmult.infrastructure.latex import KPSEWHICH_COMMAND, PDFLATEX_COMMAND
from pdfmult.infrastructure.pdfinfo import PDFINFO_COMMAND


class DefaultsConfig(BaseModel):
    """[defaults] section: fallbacks for options not given on the command line."""

    model_config = {"frozen": True}

    number: int = 2
    force: bool = False
    silent: bool = False

    @field_validator("number")
    @classmethod
    def _supported_number(cls, value: int) -> int:
        if value not in SUPPORTED_COPIES:
            supported = ", ".join(str(n) for n in SUPPORTED_COPIES)
            raise ValueError(f"number must be one of {supported}")
        return value


class ToolsConfig(BaseModel):
    """[tools] section: external executables (names on PATH or absolute paths)."""

    model_config = {"frozen": True}

    pdflatex: str = PDFLATEX_COMMAND
    kpsewhich: str = KPSEWHICH_COMMAND
    pdfinfo: str = PDFINFO_COMMAND
