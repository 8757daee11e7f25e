"""pdflatex toolchain: availability checks and compilation.

Compilation runs in the caller's working directory so that relative input
file names inside the document resolve; auxiliary files and the PDF go to
*workdir*. Output is streamed line by line and the pipe is drained before
the exit status is read.
"""

from __future__ import annotations

import subprocess
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from pdfmult.infrastructure.pdfinfo import command_available

PDFLATEX_COMMAND = "pdflatex"
KPSEWHICH_COMMAND = "kpsewhich"
PDFPAGES_STYLE = "pdfpages.sty"

JOB_NAME = "pdfmult"


@dataclass(frozen=True)
class CompileOutcome:
    """Exit status of pdflatex and the PDF it produced, if any."""

    returncode: int
    pdf_path: Path | None

    @property
    def clean(self) -> bool:
        return self.returncode == 0 and self.pdf_path is not None


def missing_tools(
    pdflatex: str = PDFLATEX_COMMAND,
    kpsewhich: str = KPSEWHICH_COMMAND,
) -> list[str]:
    """Return the names of toolchain components that are not installed."""
    missing: list[str] = []
    if not command_available([pdflatex, "--version"]):
        missing.append(pdflatex)
    if not command_available([kpsewhich, PDFPAGES_STYLE]):
        missing.append(PDFPAGES_STYLE)
    return missing


def compile_document(
    source: str,
    *,
    workdir: Path,
    pdflatex: str = PDFLATEX_COMMAND,
    on_line: Callable[[str], None] | None = None,
) -> CompileOutcome:
    """Write *source* to ``workdir/pdfmult.tex`` and compile it.

    Args:
        source: LaTeX document text.
        workdir: Directory for the .tex file, auxiliary files, and the PDF.
        pdflatex: pdflatex executable.
        on_line: Receives each line of pdflatex output (without newline).

    Raises:
        OSError: if pdflatex cannot be started.
    """
    texfile = workdir / f"{JOB_NAME}.tex"
    texfile.write_text(source + "\n", encoding="utf-8")

    cmd = [
        pdflatex,
        "-interaction=nonstopmode",
        "-output-directory",
        str(workdir),
        str(texfile),
    ]
    with subprocess.Popen(
        cmd,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        errors="replace",
    ) as proc:
        assert proc.stdout is not None
        for line in proc.stdout:
            if on_line is not None:
                on_line(line.rstrip("\n"))
        returncode = proc.wait()

    pdf_path = workdir / f"{JOB_NAME}.pdf"
    return CompileOutcome(
        returncode=returncode,
        pdf_path=pdf_path if pdf_path.is_file() else None,
    )
