from functools import partial

from resume_pipeline.config.settings import Settings
from resume_pipeline.ocr import rasterizer
from resume_pipeline.ocr.base import BaseOcrEngine
from resume_pipeline.ocr.null_adapter import NullOcrEngine
from resume_pipeline.ocr.ocr_fallback import OcrFallback
from resume_pipeline.ocr.tesseract_adapter import TesseractAdapter


class OcrEngineFactory:
    """Creates the correct OCR engine based on settings."""

    ENGINES = ("tesseract", "none")

    @classmethod
    def create(cls, settings: Settings) -> BaseOcrEngine:
        engine = settings.ocr_engine.lower()
        if engine == "tesseract":
            return TesseractAdapter(
                language=settings.ocr_language, tesseract_cmd=settings.tesseract_cmd
            )
        if engine == "none":
            return NullOcrEngine()
        raise ValueError(f"Unknown OCR engine '{engine}'. Choose from: {list(cls.ENGINES)}")

    @classmethod
    def create_fallback(cls, settings: Settings) -> OcrFallback:
        engine = cls.create(settings)
        return OcrFallback(
            engine=None if isinstance(engine, NullOcrEngine) else engine,
            max_workers=settings.ocr_max_workers,
            rasterize=partial(
                rasterizer.render_pages,
                zoom=settings.ocr_zoom,
                max_pages=settings.ocr_max_pages,
            ),
        )
