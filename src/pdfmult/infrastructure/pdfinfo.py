"""Page-count lookup through the ``pdfinfo`` system tool.

Every failure (missing binary, non-zero exit, no parsable ``Pages`` field)
is reported the same way: as ``None``.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from pathlib import Path

PDFINFO_COMMAND = "pdfinfo"


def command_available(args: Sequence[str]) -> bool:
    """Run *args* silently and report whether it exited successfully."""
    try:
        result = subprocess.run(
            list(args),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError:
        return False
    return result.returncode == 0


def parse_page_count(output: str) -> int | None:
    """Extract the ``Pages`` field from ``pdfinfo`` key/value output."""
    for line in output.splitlines():
        key, sep, value = line.partition(":")
        if not sep or key.strip() != "Pages":
            continue
        try:
            count = int(value.strip())
        except ValueError:
            return None
        return count if count > 0 else None
    return None


def read_page_count(path: str | Path, *, command: str = PDFINFO_COMMAND) -> int | None:
    """Return the page count of *path*, or None if it cannot be obtained."""
    try:
        result = subprocess.run(
            [command, str(path)],
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            errors="replace",
            check=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return None
    return parse_page_count(result.stdout)
