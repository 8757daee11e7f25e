"""The pdfmult command.

Parses and validates options and merges them with the configured defaults.
In PDF mode the toolchain is checked before the overwrite prompt, so a
missing pdflatex fails without asking first. The MultiplyRequest then goes
to the service.
"""

from __future__ import annotations

from pathlib import Path

import click
from click.core import ParameterSource
from pydantic import ValidationError

from pdfmult import PROGNAME, __version__
from pdfmult.commands._base import PdfmultCommand
from pdfmult.commands._context import AppContext
from pdfmult.config.settings import PdfmultSettings
from pdfmult.domain.layout import SUPPORTED_COPIES
from pdfmult.domain.naming import STDOUT, default_output_name
from pdfmult.services.multiply import MultiplyRequest, MultiplyService

_EXAMPLES = """\
  pdfmult sample.pdf                 # =>  sample_2.pdf (2 copies)
  pdfmult -n 4 sample.pdf            # =>  sample_4.pdf (4 copies)
  pdfmult sample.pdf -o outfile.pdf  # =>  outfile.pdf  (2 copies)
  pdfmult sample.pdf -p 3            # =>  processes 3 pages
  pdfmult -l sample.pdf              # =>  sample_2.tex (LaTeX source)
  pdfmult -l -o - sample.pdf         # =>  LaTeX source on stdout"""


def _given(ctx: click.Context, name: str) -> bool:
    """True when *name* was set on the command line rather than defaulted."""
    return ctx.get_parameter_source(name) is not ParameterSource.DEFAULT


def _echo_progress(line: str) -> None:
    click.echo(line, err=True)


@click.command(
    cls=PdfmultCommand,
    examples=_EXAMPLES,
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog="Report bugs on the pdfmult home page: <https://github.com/stomar/pdfmult/>",
)
@click.version_option(__version__, "-v", "--version", prog_name=PROGNAME)
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-n",
    "--number",
    type=click.Choice([str(n) for n in SUPPORTED_COPIES]),
    default=None,
    help="Number of copies to put on one page (default: 2).",
)
@click.option(
    "-o",
    "--output",
    "outfile",
    metavar="FILE",
    default=None,
    help="Output file (default: file_2.pdf). Use - for standard output (with -l).",
)
@click.option(
    "-p",
    "--pages",
    type=click.IntRange(min=1),
    default=None,
    help="Number of pages to convert. If given, pdfmult does not try to "
    "obtain the page count from the source PDF.",
)
@click.option(
    "-f",
    "--force/--no-force",
    default=False,
    help="Do not prompt before overwriting.",
)
@click.option(
    "-l",
    "--latex",
    is_flag=True,
    help="Create a LaTeX file instead of a PDF file (default: file_2.tex).",
)
@click.option(
    "-s",
    "--silent/--no-silent",
    default=False,
    help="Do not output progress information.",
)
@click.option("--verbose", is_flag=True, help="Detailed log output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    metavar="PATH",
    help="Override config file path.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    file: str,
    number: str | None,
    outfile: str | None,
    pages: int | None,
    force: bool,
    latex: bool,
    silent: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """Rearrange multiple copies of a PDF page (shrunken) on one page.

    The paper size of the produced PDF file is A4, the input file is also
    assumed to be in A4 format. The input PDF file may consist of several
    pages. If pdfmult succeeds in obtaining the page count it will rearrange
    all pages, if not, only the first page is processed (unless the page
    count was specified via command line option).
    """
    try:
        settings = PdfmultSettings.from_cli(
            config_path=config_path,
            verbose=verbose,
            log_json=log_json,
        )
    except ValidationError as exc:
        raise click.ClickException(f"invalid configuration: {exc}") from exc

    app = AppContext(settings)
    ctx.obj = app

    defaults = settings.defaults
    copies = int(number) if number is not None else defaults.number
    if not _given(ctx, "force"):
        force = defaults.force
    if not _given(ctx, "silent"):
        silent = defaults.silent

    if outfile is None:
        outfile = default_output_name(file, copies, latex=latex)
    elif outfile == "":
        raise click.BadParameter("must not be empty", param_hint="'-o' / '--output'")
    elif outfile == STDOUT and not latex:
        raise click.BadParameter(
            "standard output is only supported together with -l/--latex",
            param_hint="'-o' / '--output'",
        )
    if outfile != STDOUT and Path(outfile).is_dir():
        raise click.BadParameter(
            f"`{outfile}' is a directory",
            param_hint="'-o' / '--output'",
        )

    service = MultiplyService(settings)
    if not latex:
        failure = service.check_toolchain()
        if failure is not None:
            app.emit(failure)

    if outfile != STDOUT and not force and Path(outfile).exists():
        if not click.confirm(f"File `{outfile}' already exists. Overwrite?", err=True):
            ctx.exit(0)

    request = MultiplyRequest(
        infile=file,
        outfile=outfile,
        copies=copies,
        pages=pages,
        latex=latex,
    )
    result = service.run(
        request,
        progress=None if silent else _echo_progress,
        check_tools=False,
    )
    app.emit(result, silent=silent)
