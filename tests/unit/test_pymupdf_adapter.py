import pytest

from resume_pipeline.pdf.exceptions import PdfExtractionError
from resume_pipeline.pdf.pymupdf_adapter import PyMuPdfAdapter


class TestPyMuPdfAdapter:
    def test_extract_returns_page_text(self, sample_pdf_bytes: bytes) -> None:
        pages = PyMuPdfAdapter().extract_pages(sample_pdf_bytes)
        assert len(pages) == 1
        assert "Hello PDF World" in pages[0]

    def test_extract_multi_page(self, multi_page_pdf_bytes: bytes) -> None:
        pages = PyMuPdfAdapter().extract_pages(multi_page_pdf_bytes)
        assert "Page one content" in pages[0]
        assert "Page two content" in pages[1]

    def test_extract_empty_pdf_returns_empty_page(self, empty_pdf_bytes: bytes) -> None:
        assert PyMuPdfAdapter().extract_pages(empty_pdf_bytes) == [""]

    def test_extract_raises_on_invalid_bytes(self) -> None:
        with pytest.raises(PdfExtractionError):
            PyMuPdfAdapter().extract_pages(b"not a pdf")
