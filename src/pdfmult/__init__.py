"""pdfmult: put multiple copies of a PDF page on one sheet."""

PROGNAME = "pdfmult"

__version__ = "1.0.0"
