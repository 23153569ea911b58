from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor

from resume_pipeline.logging.logger import Log
from resume_pipeline.ocr import rasterizer
from resume_pipeline.ocr.base import BaseOcrEngine
from resume_pipeline.ocr.exceptions import OcrError

PAGE_SEPARATOR = "\n\n"


class OcrFallback:
    """Recognizes page images in parallel and joins the text in page order.

    A page that fails contributes an empty string; the batch is never aborted.
    """

    def __init__(
        self,
        engine: BaseOcrEngine | None,
        max_workers: int = 4,
        rasterize: Callable[[bytes], list[bytes]] = rasterizer.render_pages,
    ) -> None:
        self._engine = engine
        self._max_workers = max(1, max_workers)
        self._rasterize = rasterize

    def _recognize_page(self, index: int, image: bytes) -> str:
        if self._engine is None:
            return ""
        try:
            return self._engine.recognize(image)
        except OcrError as exc:
            Log.warning(f"OCR failed on page {index + 1}: {exc}")
            return ""
        except Exception as exc:
            Log.error(f"OCR engine crashed on page {index + 1}: {exc}")
            return ""

    def recognize(self, page_images: Sequence[bytes]) -> str:
        if not page_images or self._engine is None:
            return ""
        workers = min(len(page_images), self._max_workers)
        with ThreadPoolExecutor(max_workers=workers) as pool:
            texts = list(pool.map(self._recognize_page, range(len(page_images)), page_images))
        Log.info(f"OCR recognized {sum(1 for t in texts if t)} of {len(texts)} pages")
        return PAGE_SEPARATOR.join(t for t in texts if t)

    def recognize_pdf(self, pdf_bytes: bytes) -> str:
        """Rasterize the PDF and recognize its pages."""
        if self._engine is None:
            return ""
        return self.recognize(self._rasterize(pdf_bytes))
