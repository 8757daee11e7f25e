"""Shared pytest fixtures and test helpers for pdfmult tests."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Generator
from dataclasses import dataclass
from pathlib import Path

import pytest
from click.testing import CliRunner

from pdfmult.config.models import ToolsConfig
from pdfmult.config.settings import PdfmultSettings

# pdflatex stand-in: copies the .tex source into pdfmult.pdf so tests can
# inspect what would have been typeset.
FAKE_PDFLATEX = r"""#!/bin/sh
outdir=.
texfile=
while [ $# -gt 0 ]; do
  case "$1" in
    --version) echo "pdfTeX 3.141592653-2.6-1.40.25"; exit 0 ;;
    -output-directory) outdir="$2"; shift 2 ;;
    -*) shift ;;
    *) texfile="$1"; shift ;;
  esac
done
echo "This is pdfTeX, Version 3.141592653-2.6-1.40.25"
echo "(./pdfmult.tex"
cat "$texfile" > "$outdir/pdfmult.pdf"
echo "Output written on pdfmult.pdf (1 page)."
"""

FAKE_PDFLATEX_BROKEN = r"""#!/bin/sh
echo "! LaTeX Error: File \`pdfpages.sty' not found."
exit 1
"""

FAKE_PDFLATEX_WARNS = r"""#!/bin/sh
outdir=.
while [ $# -gt 0 ]; do
  case "$1" in
    --version) exit 0 ;;
    -output-directory) outdir="$2"; shift 2 ;;
    *) shift ;;
  esac
done
echo "! Undefined control sequence."
echo "%PDF-1.5" > "$outdir/pdfmult.pdf"
exit 1
"""

FAKE_KPSEWHICH = r"""#!/bin/sh
if [ "$1" = "pdfpages.sty" ]; then
  echo "/usr/share/texmf/tex/latex/pdfpages/pdfpages.sty"
  exit 0
fi
exit 1
"""

FAKE_PDFINFO = r"""#!/bin/sh
if [ ! -f "$1" ]; then
  echo "I/O Error: Couldn't open file '$1'" >&2
  exit 1
fi
echo "Title:          sample"
echo "Producer:       pdfTeX-1.40.25"
echo "Pages:          3"
echo "Page size:      595.276 x 841.89 pts (A4)"
"""


@dataclass(frozen=True)
class FakeTools:
    """Paths of the fake executables written for a test."""

    bin_dir: Path
    pdflatex: Path
    kpsewhich: Path
    pdfinfo: Path

    def config(self) -> ToolsConfig:
        return ToolsConfig(
            pdflatex=str(self.pdflatex),
            kpsewhich=str(self.kpsewhich),
            pdfinfo=str(self.pdfinfo),
        )


def write_tool(bin_dir: Path, name: str, script: str) -> Path:
    """Write an executable shell script and return its path."""
    path = bin_dir / name
    path.write_text(script, encoding="utf-8")
    path.chmod(0o755)
    return path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep PDFMULT_* and color-forcing variables out of tests."""
    for key in list(os.environ):
        if key.startswith("PDFMULT_"):
            monkeypatch.delenv(key)
    monkeypatch.delenv("FORCE_COLOR", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pdfmult_logger = logging.getLogger("pdfmult")
    pdfmult_level = pdfmult_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pdfmult_logger.setLevel(pdfmult_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test inside an empty temporary directory."""
    root = tmp_path / "work"
    root.mkdir()
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def sample_pdf(workdir: Path) -> Path:
    """A stand-in input file named ``sample.pdf`` in the working directory."""
    path = workdir / "sample.pdf"
    path.write_bytes(b"%PDF-1.4\n%stand-in\n")
    return path


@pytest.fixture
def fake_tools(tmp_path: Path) -> FakeTools:
    """Fake pdflatex, kpsewhich and pdfinfo executables."""
    if sys.platform == "win32":
        pytest.skip("fake tools are POSIX shell scripts")
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    return FakeTools(
        bin_dir=bin_dir,
        pdflatex=write_tool(bin_dir, "pdflatex", FAKE_PDFLATEX),
        kpsewhich=write_tool(bin_dir, "kpsewhich", FAKE_KPSEWHICH),
        pdfinfo=write_tool(bin_dir, "pdfinfo", FAKE_PDFINFO),
    )


@pytest.fixture
def fake_tools_env(fake_tools: FakeTools, monkeypatch: pytest.MonkeyPatch) -> FakeTools:
    """Point the PDFMULT_TOOLS__* variables at the fake executables."""
    monkeypatch.setenv("PDFMULT_TOOLS__PDFLATEX", str(fake_tools.pdflatex))
    monkeypatch.setenv("PDFMULT_TOOLS__KPSEWHICH", str(fake_tools.kpsewhich))
    monkeypatch.setenv("PDFMULT_TOOLS__PDFINFO", str(fake_tools.pdfinfo))
    return fake_tools


@pytest.fixture
def missing_command(tmp_path: Path) -> str:
    """Absolute path of an executable that does not exist."""
    return str(tmp_path / "no-bin" / "not_a_command")


def make_settings(tools: ToolsConfig | None = None, **kwargs: object) -> PdfmultSettings:
    """Settings without TOML discovery, optionally with custom tools."""
    if tools is not None:
        kwargs["tools"] = tools
    return PdfmultSettings(**kwargs)
