"""MultiplyService: turn one input PDF into an N-up LaTeX document or PDF.

Steps: check the toolchain (PDF mode only), resolve the page count, render
the document, then either write the LaTeX source or compile it in a
temporary directory and move the PDF onto the output file.
"""

from __future__ import annotations

import functools
import logging
import shutil
import tempfile
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pdfmult.domain.document import DocumentSpec, render
from pdfmult.domain.layout import Layout
from pdfmult.domain.naming import STDOUT
from pdfmult.domain.pages import resolve_page_count
from pdfmult.infrastructure.latex import compile_document, missing_tools
from pdfmult.infrastructure.pdfinfo import read_page_count
from pdfmult.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from pdfmult.config.settings import PdfmultSettings

logger = logging.getLogger(__name__)

OP = "multiply"


@dataclass(frozen=True)
class MultiplyRequest:
    """Validated options for one run.

    Attributes:
        infile: Source PDF, as given on the command line.
        outfile: Destination file, or ``"-"`` for stdout (LaTeX mode only).
        copies: Copies per sheet, one of the supported layouts.
        pages: Explicit page count, or None to ask pdfinfo.
        latex: Write LaTeX source instead of compiling.
    """

    infile: str
    outfile: str
    copies: int
    pages: int | None = None
    latex: bool = False


def _fail(code: str, message: str, **detail: Any) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=OP,
        error=ServiceError(code=code, message=message, detail=detail),
    )


class MultiplyService:
    """Runs a :class:`MultiplyRequest` with the configured external tools."""

    def __init__(self, settings: PdfmultSettings) -> None:
        self._tools = settings.tools

    def check_toolchain(self) -> ServiceResult | None:
        """Return a TOOL_MISSING failure if pdflatex or pdfpages.sty is absent."""
        missing = missing_tools(self._tools.pdflatex, self._tools.kpsewhich)
        if not missing:
            return None
        return _fail(
            "TOOL_MISSING",
            f"`{missing[0]}' seems not to be installed (you might try using the -l option)",
            missing=missing,
        )

    def run(
        self,
        request: MultiplyRequest,
        *,
        progress: Callable[[str], None] | None = None,
        check_tools: bool = True,
    ) -> ServiceResult:
        """Produce the output file (or stdout text) for *request*.

        Args:
            request: What to produce.
            progress: Receives pdflatex output lines while compiling.
            check_tools: Run :meth:`check_toolchain` first (PDF mode only).
        """
        if check_tools and not request.latex:
            failure = self.check_toolchain()
            if failure is not None:
                return failure

        lookup = functools.partial(read_page_count, command=self._tools.pdfinfo)
        pages = resolve_page_count(request.pages, request.infile, lookup=lookup)
        logger.debug(
            "Page count %d for %s (%s)",
            pages,
            request.infile,
            "explicit" if request.pages is not None else self._tools.pdfinfo,
        )

        layout = Layout(request.copies)
        document = render(DocumentSpec(request.infile, layout, pages))

        data: dict[str, Any] = {
            "infile": request.infile,
            "outfile": request.outfile,
            "copies": layout.copies,
            "geometry": layout.geometry,
            "pages": pages,
            "mode": "latex" if request.latex else "pdf",
        }

        if request.latex:
            return self._write_latex(document, request.outfile, data)
        return self._compile(document, request.outfile, data, progress)

    def _write_latex(self, document: str, outfile: str, data: dict[str, Any]) -> ServiceResult:
        if outfile == STDOUT:
            return ServiceResult(ok=True, op=OP, data={**data, "document": document})
        try:
            Path(outfile).write_text(document + "\n", encoding="utf-8")
        except OSError as exc:
            return _fail("WRITE_FAILED", f"cannot write `{outfile}': {exc.strerror or exc}")
        logger.debug("Wrote LaTeX source to %s", outfile)
        return ServiceResult(ok=True, op=OP, data=data)

    def _compile(
        self,
        document: str,
        outfile: str,
        data: dict[str, Any],
        progress: Callable[[str], None] | None,
    ) -> ServiceResult:
        warnings: list[str] = []
        with tempfile.TemporaryDirectory(prefix="pdfmult") as tmp:
            workdir = Path(tmp)
            try:
                outcome = compile_document(
                    document,
                    workdir=workdir,
                    pdflatex=self._tools.pdflatex,
                    on_line=progress,
                )
            except OSError as exc:
                return _fail("COMPILE_FAILED", f"cannot run `{self._tools.pdflatex}': {exc}")

            logger.debug("pdflatex exited with status %d", outcome.returncode)
            if outcome.pdf_path is None:
                return _fail(
                    "COMPILE_FAILED",
                    f"pdflatex produced no output (exit status {outcome.returncode})",
                    returncode=outcome.returncode,
                )
            if not outcome.clean:
                warnings.append(
                    f"pdflatex exited with status {outcome.returncode}; "
                    "the output may be incomplete"
                )

            try:
                shutil.move(str(outcome.pdf_path), outfile)
            except OSError as exc:
                return _fail("WRITE_FAILED", f"cannot write `{outfile}': {exc.strerror or exc}")

        return ServiceResult(ok=True, op=OP, data=data, warnings=warnings)
