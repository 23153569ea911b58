from dataclasses import dataclass
from enum import Enum

from resume_pipeline.logging.logger import Log
from resume_pipeline.pdf import raw_scanner
from resume_pipeline.pdf.base import BasePdfExtractor
from resume_pipeline.pdf.exceptions import PdfExtractionError

MIN_TEXT_LENGTH = 100
PAGE_SEPARATOR = "\n\n"


class Provenance(str, Enum):
    DIRECT = "Direct"
    OCR = "OCR"
    FALLBACK = "Fallback"


@dataclass(frozen=True)
class ExtractedText:
    content: str
    provenance: Provenance

    @property
    def length(self) -> int:
        return len(self.content)

    @property
    def is_sufficient(self) -> bool:
        return self.length >= MIN_TEXT_LENGTH


class TextExtractor:
    """Text from a PDF via the configured backend, raw-byte scan on failure.

    Never raises. The worst case is empty content with ``Provenance.FALLBACK``.
    """

    def __init__(self, primary: BasePdfExtractor | None) -> None:
        self._primary = primary

    def extract(self, pdf_bytes: bytes) -> ExtractedText:
        if self._primary is not None:
            try:
                pages = self._primary.extract_pages(pdf_bytes)
                content = PAGE_SEPARATOR.join(p for p in pages if p)
                Log.debug(f"Extracted {len(content)} chars from {len(pages)} pages")
                return ExtractedText(content=content, provenance=Provenance.DIRECT)
            except PdfExtractionError as exc:
                Log.warning(f"PDF backend failed, scanning raw bytes: {exc}")

        try:
            content = raw_scanner.scan(pdf_bytes)
        except (ValueError, UnicodeError) as exc:
            Log.warning(f"Raw PDF scan failed: {exc}")
            content = ""
        return ExtractedText(content=content, provenance=Provenance.FALLBACK)
