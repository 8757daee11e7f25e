"""LaTeX document generation.

The document includes the source PDF once per source page through the
``pdfpages`` package; each ``\\includepdf`` repeats the same page index
``copies`` times so that one output sheet carries N shrunken copies of it.

Rendering goes through a Jinja2 template with LaTeX-friendly delimiters
(``<< var >>`` and ``<% block %>``) so the braces of the markup need no
escaping.
"""

from __future__ import annotations

from dataclasses import dataclass

from jinja2 import Environment, StrictUndefined

from pdfmult.domain.layout import Layout

DOCUMENT_TEMPLATE = r"""\documentclass[<< class_options >>]{article}
\usepackage{pdfpages}
\pagestyle{empty}
\setlength{\parindent}{0pt}
\begin{document}%
<% for pages in sheets %>
\includepdf[pages={<< pages >>},nup=<< geometry >>]{<< filename >>}%
<% endfor %>
\end{document}"""

_ENV = Environment(
    block_start_string="<%",
    block_end_string="%>",
    variable_start_string="<<",
    variable_end_string=">>",
    comment_start_string="<#",
    comment_end_string="#>",
    trim_blocks=True,
    autoescape=False,
    undefined=StrictUndefined,
)

_TEMPLATE = _ENV.from_string(DOCUMENT_TEMPLATE)


@dataclass(frozen=True)
class DocumentSpec:
    """Everything needed to render one document.

    Attributes:
        source_file: Input PDF name, inserted verbatim.
        layout: Copies per sheet and orientation.
        page_count: Number of *source* pages to process (>= 1).
    """

    source_file: str
    layout: Layout
    page_count: int


class LaTeXDocument:
    """The LaTeX source for a :class:`DocumentSpec`.

    ``str(document)`` and :meth:`render` return the same text.
    """

    def __init__(self, spec: DocumentSpec) -> None:
        self.spec = spec

    @property
    def class_options(self) -> str:
        if self.spec.layout.is_landscape:
            return "a4paper,landscape"
        return "a4paper"

    def page_list(self, page: int) -> str:
        """Comma-joined *page* repeated once per copy, e.g. ``2,2,2,2``."""
        return ",".join([str(page)] * self.spec.layout.copies)

    def render(self) -> str:
        sheets = [self.page_list(page) for page in range(1, self.spec.page_count + 1)]
        return _TEMPLATE.render(
            class_options=self.class_options,
            sheets=sheets,
            geometry=self.spec.layout.geometry,
            filename=self.spec.source_file,
        )

    def __str__(self) -> str:
        return self.render()


def render(spec: DocumentSpec) -> str:
    """Render *spec* to LaTeX source (no trailing newline)."""
    return LaTeXDocument(spec).render()
