class PdfExtractionError(Exception):
    """Raised when a PDF backend cannot extract text."""
