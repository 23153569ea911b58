from resume_pipeline.config.settings import Settings
from resume_pipeline.conversion.base import BaseRenderer
from resume_pipeline.conversion.playwright_renderer import PlaywrightRenderer
from resume_pipeline.conversion.pymupdf_renderer import PyMuPdfRenderer


class RendererFactory:
    """Creates the correct HTML renderer based on settings."""

    ENGINES = ("pymupdf", "playwright")

    @classmethod
    def create(cls, settings: Settings) -> BaseRenderer:
        engine = settings.renderer_engine.lower()
        if engine == "pymupdf":
            return PyMuPdfRenderer()
        if engine == "playwright":
            return PlaywrightRenderer(timeout_ms=settings.renderer_timeout_ms)
        raise ValueError(
            f"Unknown renderer engine '{engine}'. Choose from: {list(cls.ENGINES)}"
        )
