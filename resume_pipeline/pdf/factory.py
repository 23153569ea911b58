from resume_pipeline.config.settings import Settings
from resume_pipeline.pdf.base import BasePdfExtractor
from resume_pipeline.pdf.pdfplumber_adapter import PdfPlumberAdapter
from resume_pipeline.pdf.pymupdf_adapter import PyMuPdfAdapter
from resume_pipeline.pdf.text_extractor import TextExtractor


class PdfExtractorFactory:
    """Creates the correct PDF extractor based on settings."""

    ADAPTERS: dict[str, type[BasePdfExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()

    @classmethod
    def create_text_extractor(cls, settings: Settings) -> TextExtractor:
        """TextExtractor backed by the configured engine plus the raw-byte fallback."""
        return TextExtractor(primary=cls.create(settings))
