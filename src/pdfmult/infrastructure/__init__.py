"""Adapters for the external tools pdfmult drives (pdfinfo, pdflatex)."""
