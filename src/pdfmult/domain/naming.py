"""Default output file names."""

from __future__ import annotations

import re

STDOUT = "-"

_PDF_SUFFIX = re.compile(r"\.pdf$")


def default_output_name(infile: str, copies: int, *, latex: bool = False) -> str:
    """Derive the output name: ``sample.pdf`` -> ``sample_4.pdf`` (or ``.tex``)."""
    stem = _PDF_SUFFIX.sub("", infile)
    extension = "tex" if latex else "pdf"
    return f"{stem}_{copies}.{extension}"
