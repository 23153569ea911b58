class ConversionError(Exception):
    """Raised when a Word document cannot be turned into HTML."""


class RenderingError(Exception):
    """Raised when a renderer cannot produce a PDF from HTML."""
