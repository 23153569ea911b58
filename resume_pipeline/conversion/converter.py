from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from resume_pipeline.conversion import docx_html, placeholder
from resume_pipeline.conversion.base import BaseRenderer
from resume_pipeline.conversion.exceptions import ConversionError, RenderingError
from resume_pipeline.logging.logger import Log

WORD_EXTENSIONS = ("doc", "docx")


class ConversionOutcome(str, Enum):
    PASSTHROUGH = "Passthrough"
    CONVERTED = "Converted"
    PLACEHOLDER = "Placeholder"


@dataclass(frozen=True)
class ConversionResult:
    pdf_bytes: bytes
    outcome: ConversionOutcome
    pdf_path: Path | None = None
    message: str = ""


class DocumentConverter:
    """Turns DOC/DOCX into PDF so text extraction has a single input format.

    ``convert`` never raises. Unreadable Word files become a placeholder PDF
    carrying whatever printable text the binary holds.
    """

    def __init__(self, renderer: BaseRenderer) -> None:
        self._renderer = renderer

    def convert(
        self,
        data: bytes,
        extension: str,
        *,
        original_name: str,
        scratch_dir: Path | None = None,
    ) -> ConversionResult:
        extension = extension.lower().lstrip(".")
        if extension not in WORD_EXTENSIONS:
            return ConversionResult(pdf_bytes=data, outcome=ConversionOutcome.PASSTHROUGH)

        try:
            html = docx_html.to_html(data, title=original_name)
            pdf_bytes = self._renderer.render(html)
        except (ConversionError, RenderingError) as exc:
            Log.warning(f"Conversion of '{original_name}' failed, using placeholder: {exc}")
            pdf_bytes = self._placeholder(data, original_name)
            message = str(exc)
            outcome = ConversionOutcome.PLACEHOLDER
        else:
            Log.info(f"Converted '{original_name}' to PDF ({len(pdf_bytes)} bytes)")
            message = ""
            outcome = ConversionOutcome.CONVERTED

        pdf_path = None
        if scratch_dir is not None:
            pdf_path = self._write(scratch_dir, original_name, extension, data, pdf_bytes, outcome)
        return ConversionResult(
            pdf_bytes=pdf_bytes, outcome=outcome, pdf_path=pdf_path, message=message
        )

    def _placeholder(self, data: bytes, original_name: str) -> bytes:
        try:
            return self._renderer.render(placeholder.to_html(data, original_name))
        except RenderingError as exc:
            Log.warning(f"Placeholder rendering failed, drawing plain PDF: {exc}")
        try:
            return placeholder.plain_pdf(data, original_name)
        except Exception as exc:
            Log.error(f"Plain placeholder PDF failed, keeping original bytes: {exc}")
            return data

    @staticmethod
    def _write(
        scratch_dir: Path,
        original_name: str,
        extension: str,
        original: bytes,
        pdf_bytes: bytes,
        outcome: ConversionOutcome,
    ) -> Path | None:
        stem = Path(original_name).stem or "document"
        try:
            scratch_dir.mkdir(parents=True, exist_ok=True)
            pdf_path = scratch_dir / f"{stem}.pdf"
            pdf_path.write_bytes(pdf_bytes)
            if outcome is ConversionOutcome.PLACEHOLDER:
                (scratch_dir / f"{stem}.original.{extension}").write_bytes(original)
        except OSError as exc:
            Log.warning(f"Cannot write conversion output to {scratch_dir}: {exc}")
            return None
        return pdf_path
