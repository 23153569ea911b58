from abc import ABC, abstractmethod


class BaseRenderer(ABC):
    """Contract for HTML to PDF rendering adapters."""

    @abstractmethod
    def render(self, html: str) -> bytes:
        """Render a complete HTML document to PDF bytes.

        Raises:
            RenderingError: if the document cannot be rendered.
        """
