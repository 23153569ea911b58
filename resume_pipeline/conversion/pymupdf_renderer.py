import io

import pymupdf

from resume_pipeline.conversion.base import BaseRenderer
from resume_pipeline.conversion.exceptions import RenderingError

_MARGIN_PT = 56.7  # 20 mm


class PyMuPdfRenderer(BaseRenderer):
    """Lays out HTML with the PyMuPDF Story API. No browser required."""

    def render(self, html: str) -> bytes:
        try:
            story = pymupdf.Story(html=html)
            buffer = io.BytesIO()
            writer = pymupdf.DocumentWriter(buffer)
            mediabox = pymupdf.paper_rect("a4")
            where = mediabox + (_MARGIN_PT, _MARGIN_PT, -_MARGIN_PT, -_MARGIN_PT)
            more = True
            while more:
                device = writer.begin_page(mediabox)
                more, _ = story.place(where)
                story.draw(device)
                writer.end_page()
            writer.close()
            return buffer.getvalue()
        except Exception as exc:
            raise RenderingError(f"pymupdf rendering failed: {exc}") from exc
