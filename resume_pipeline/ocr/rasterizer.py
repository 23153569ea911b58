import pymupdf

from resume_pipeline.logging.logger import Log


def render_pages(pdf_bytes: bytes, zoom: float = 2.0, max_pages: int = 10) -> list[bytes]:
    """PNG bytes for the first ``max_pages`` pages. Returns [] if the PDF cannot be opened."""
    matrix = pymupdf.Matrix(zoom, zoom)
    try:
        with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
            return [
                page.get_pixmap(matrix=matrix, alpha=False).tobytes("png")
                for page in doc.pages(0, min(max_pages, doc.page_count))
            ]
    except Exception as exc:
        Log.warning(f"Cannot rasterize PDF for OCR: {exc}")
        return []
