"""Log setup for pdfmult.

All records, from structlog and from the stdlib ``logging`` loggers used by
the services, are rendered by one stderr handler. pdfmult's own loggers are
quiet below WARNING unless ``--verbose`` is given; ``--log-json`` swaps the
console renderer for one JSON object per line.
"""

from __future__ import annotations

import logging
import sys

import structlog

_PACKAGE_LOGGER = "pdfmult"


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route pdfmult's log records to stderr.

    Calling it again replaces the handler installed by the previous call,
    so each CLI invocation starts from a known state.

    Args:
        verbose: Let debug records from the ``pdfmult`` loggers through
            (page counts, tool paths, pdflatex status).
        log_json: Render records as JSON lines rather than console text.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(_PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
