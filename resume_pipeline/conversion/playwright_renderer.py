from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from resume_pipeline.conversion.base import BaseRenderer
from resume_pipeline.conversion.exceptions import RenderingError

_MARGIN = {"top": "20mm", "right": "20mm", "bottom": "20mm", "left": "20mm"}


class PlaywrightRenderer(BaseRenderer):
    """Renders HTML through headless Chromium."""

    def __init__(self, timeout_ms: int) -> None:
        self._timeout_ms = timeout_ms

    def render(self, html: str) -> bytes:
        try:
            with sync_playwright() as p:
                browser = p.chromium.launch(
                    headless=True, args=["--no-sandbox", "--disable-setuid-sandbox"]
                )
                try:
                    page = browser.new_page()
                    page.set_default_timeout(self._timeout_ms)
                    page.set_content(html, wait_until="networkidle")
                    return page.pdf(format="A4", print_background=True, margin=_MARGIN)
                finally:
                    browser.close()
        except PlaywrightError as exc:
            raise RenderingError(f"playwright rendering failed: {exc}") from exc
