"""Click plumbing for the pdfmult command: base class and shared context."""
