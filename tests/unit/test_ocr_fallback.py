import threading
import time
from unittest.mock import MagicMock

from resume_pipeline.ocr.exceptions import OcrError
from resume_pipeline.ocr.ocr_fallback import OcrFallback


class _SlowFirstEngine:
    """Finishes later pages before earlier ones."""

    def __init__(self) -> None:
        self.threads: set[int] = set()

    def recognize(self, image_bytes: bytes) -> str:
        self.threads.add(threading.get_ident())
        if image_bytes == b"page-1":
            time.sleep(0.05)
        return image_bytes.decode().upper()


class TestRecognize:
    def test_joins_pages_in_order(self) -> None:
        engine = _SlowFirstEngine()
        text = OcrFallback(engine, max_workers=3).recognize([b"page-1", b"page-2", b"page-3"])
        assert text == "PAGE-1\n\nPAGE-2\n\nPAGE-3"

    def test_failing_page_contributes_nothing(self) -> None:
        engine = MagicMock()
        engine.recognize.side_effect = ["first", OcrError("blurry"), "third"]
        text = OcrFallback(engine, max_workers=1).recognize([b"a", b"b", b"c"])
        assert text == "first\n\nthird"

    def test_engine_crash_skips_only_that_page(self) -> None:
        engine = MagicMock()
        engine.recognize.side_effect = ["page one", RuntimeError("engine crashed"), "page three"]
        text = OcrFallback(engine, max_workers=1).recognize([b"a", b"b", b"c"])
        assert text == "page one\n\npage three"

    def test_all_pages_failing_gives_empty(self) -> None:
        engine = MagicMock()
        engine.recognize.side_effect = OcrError("broken")
        assert OcrFallback(engine).recognize([b"a", b"b"]) == ""

    def test_no_pages(self) -> None:
        engine = MagicMock()
        assert OcrFallback(engine).recognize([]) == ""
        engine.recognize.assert_not_called()

    def test_without_engine(self) -> None:
        assert OcrFallback(None).recognize([b"a"]) == ""

    def test_single_worker_uses_one_thread(self) -> None:
        engine = _SlowFirstEngine()
        OcrFallback(engine, max_workers=1).recognize([b"page-1", b"page-2", b"page-3"])
        assert len(engine.threads) == 1


class TestRecognizePdf:
    def test_rasterizes_then_recognizes(self) -> None:
        rasterize = MagicMock(return_value=[b"one", b"two"])
        engine = MagicMock()
        engine.recognize.side_effect = lambda image: image.decode()
        text = OcrFallback(engine, rasterize=rasterize).recognize_pdf(b"%PDF")
        rasterize.assert_called_once_with(b"%PDF")
        assert text == "one\n\ntwo"

    def test_without_engine_skips_rasterizing(self) -> None:
        rasterize = MagicMock()
        assert OcrFallback(None, rasterize=rasterize).recognize_pdf(b"%PDF") == ""
        rasterize.assert_not_called()
