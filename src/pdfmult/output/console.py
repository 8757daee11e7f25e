"""Rich Console factory and theme for pdfmult messages.

Creates Console instances that render to a StringIO buffer, so formatters
return plain strings and the CLI decides where they go. In non-TTY
environments (tests, pipes) Rich disables color codes automatically.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PDFMULT_THEME = Theme(
    {
        "pdfmult.status": "bold green",
        "pdfmult.error": "bold red",
        "pdfmult.warning": "bold yellow",
        "pdfmult.path": "bold blue",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width.
    """
    return Console(
        file=StringIO(),
        theme=PDFMULT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
