from unittest.mock import patch

import pytest

from resume_pipeline.config.settings import Settings
from resume_pipeline.ocr.factory import OcrEngineFactory
from resume_pipeline.ocr.null_adapter import NullOcrEngine
from resume_pipeline.ocr.tesseract_adapter import TesseractAdapter


class TestOcrEngineFactory:
    def test_creates_tesseract(self) -> None:
        engine = OcrEngineFactory.create(Settings(ocr_engine="tesseract"))
        assert isinstance(engine, TesseractAdapter)

    def test_creates_null_engine(self) -> None:
        engine = OcrEngineFactory.create(Settings(ocr_engine="NONE"))
        assert isinstance(engine, NullOcrEngine)
        assert engine.recognize(b"anything") == ""

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown OCR engine"):
            OcrEngineFactory.create(Settings(ocr_engine="abbyy"))


class TestCreateFallback:
    def test_disabled_engine_recognizes_nothing(self) -> None:
        fallback = OcrEngineFactory.create_fallback(Settings(ocr_engine="none"))
        assert fallback.recognize([b"image"]) == ""

    def test_passes_rasterizer_settings(self) -> None:
        settings = Settings(ocr_engine="tesseract", ocr_zoom=3.0, ocr_max_pages=2)
        with patch(
            "resume_pipeline.ocr.factory.rasterizer.render_pages", return_value=[]
        ) as mock_render:
            fallback = OcrEngineFactory.create_fallback(settings)
            assert fallback.recognize_pdf(b"%PDF") == ""
        mock_render.assert_called_once_with(b"%PDF", zoom=3.0, max_pages=2)
