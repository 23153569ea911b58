from abc import ABC, abstractmethod


class BaseOcrEngine(ABC):
    """Contract for OCR adapters."""

    @abstractmethod
    def recognize(self, image_bytes: bytes) -> str:
        """Recognize text in one page image (PNG bytes).

        Raises:
            OcrError: if recognition fails.
        """
