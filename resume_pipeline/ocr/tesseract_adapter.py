import io

import pytesseract
from PIL import Image, UnidentifiedImageError

from resume_pipeline.ocr.base import BaseOcrEngine
from resume_pipeline.ocr.exceptions import OcrError


class TesseractAdapter(BaseOcrEngine):
    """Recognizes page images with the Tesseract binary via pytesseract."""

    def __init__(self, language: str = "eng", tesseract_cmd: str = "") -> None:
        self._language = language
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    def recognize(self, image_bytes: bytes) -> str:
        try:
            with Image.open(io.BytesIO(image_bytes)) as image:
                text = pytesseract.image_to_string(image, lang=self._language)
        except (pytesseract.TesseractError, pytesseract.TesseractNotFoundError) as exc:
            raise OcrError(f"tesseract failed: {exc}") from exc
        except (UnidentifiedImageError, OSError) as exc:
            raise OcrError(f"unreadable page image: {exc}") from exc
        return (text or "").strip()
