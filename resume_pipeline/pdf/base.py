from abc import ABC, abstractmethod


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract_pages(self, pdf_bytes: bytes) -> list[str]:
        """Extract plain text from PDF bytes, one string per page.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            Page texts in document order. Pages without text yield "".

        Raises:
            PdfExtractionError: if extraction fails for any reason.
        """
