"""AppContext: settings, logging setup, and result emission for the CLI.

Result emission routes text to stdout/stderr and turns failures into a
non-zero exit code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pdfmult.output.formatters import format_result_error, format_status, format_warning

if TYPE_CHECKING:
    from pdfmult.config.settings import PdfmultSettings
    from pdfmult.services.result import ServiceResult


class AppContext:
    """Per-invocation context created by the CLI entry point."""

    def __init__(self, settings: PdfmultSettings) -> None:
        self.settings = settings

        from pdfmult.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: ServiceResult, *, silent: bool = False) -> None:
        """Output a ServiceResult with correct exit semantics.

        * Success: LaTeX text meant for stdout is written there; otherwise
          ``Writing on <outfile>.`` goes to stderr unless *silent*.
          Warnings always go to stderr.
        * Failure: ``pdfmult: <message>`` on stderr, exit code 1.
        """
        if not result.ok:
            click.echo(format_result_error(result), err=True)
            raise SystemExit(1)

        document = result.data.get("document")
        if document is not None:
            click.echo(document)
        elif not silent:
            click.echo(format_status(result.data["outfile"]), err=True)

        for warning in result.warnings:
            click.echo(format_warning(warning), err=True)
