from resume_pipeline.ocr.base import BaseOcrEngine


class NullOcrEngine(BaseOcrEngine):
    """Used when OCR is disabled. Recognizes nothing."""

    def recognize(self, image_bytes: bytes) -> str:
        return ""
