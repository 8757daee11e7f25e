"""Message formatting for stderr.

Messages follow the GNU convention ``pdfmult: message``. Text is assembled
from rich ``Text`` parts, so file names with brackets are never read as
markup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text

from pdfmult import PROGNAME
from pdfmult.output.console import create_console, get_output

if TYPE_CHECKING:
    from pdfmult.services.result import ServiceResult


def _render(text: Text, *, no_color: bool = False) -> str:
    console = create_console(no_color=no_color)
    console.print(text, soft_wrap=True)
    return get_output(console).rstrip("\n")


def format_status(outfile: str, *, no_color: bool = False) -> str:
    """``Writing on <outfile>.``"""
    text = Text.assemble(
        ("Writing on ", "pdfmult.status"),
        (outfile, "pdfmult.path"),
        ".",
    )
    return _render(text, no_color=no_color)


def format_warning(message: str, *, no_color: bool = False) -> str:
    return _render(Text.assemble(("WARNING: ", "pdfmult.warning"), message), no_color=no_color)


def format_error(message: str, *, no_color: bool = False) -> str:
    text = Text.assemble((f"{PROGNAME}: ", "pdfmult.error"), message)
    return _render(text, no_color=no_color)


def format_result_error(result: ServiceResult, *, no_color: bool = False) -> str:
    message = result.error.message if result.error else "unknown error"
    return format_error(message, no_color=no_color)
