import pytest
from pydantic import ValidationError

from resume_pipeline.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_pdf_engine(self) -> None:
        s = Settings()
        assert s.pdf_engine == "pdfplumber"

    def test_default_renderer_engine(self) -> None:
        s = Settings()
        assert s.renderer_engine == "pymupdf"

    def test_default_ocr_settings(self) -> None:
        s = Settings()
        assert s.ocr_engine == "tesseract"
        assert s.ocr_language == "eng"
        assert s.ocr_max_pages == 10

    def test_default_completion_provider(self) -> None:
        s = Settings()
        assert s.completion_provider == "deepseek"

    def test_default_completion_limits(self) -> None:
        s = Settings()
        assert s.completion_temperature == 0.1
        assert s.completion_max_input_chars == 75000

    def test_default_ollama_timeout(self) -> None:
        s = Settings()
        assert s.completion_ollama_timeout_seconds == 120


class TestSettingsFromEnv:
    def test_loads_app_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ENV", "production")
        s = Settings()
        assert s.app_env == "production"

    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_completion_provider(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("COMPLETION_PROVIDER", "example")
        s = Settings()
        assert s.completion_provider == "example"

    def test_loads_ocr_max_workers(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OCR_MAX_WORKERS", "8")
        s = Settings()
        assert s.ocr_max_workers == 8


class TestSettingsValidation:
    def test_invalid_ocr_max_pages_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OCR_MAX_PAGES", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_temperature_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("COMPLETION_TEMPERATURE", "warm")
        with pytest.raises(ValidationError):
            Settings()
