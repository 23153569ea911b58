import re
from datetime import datetime, timezone
from pathlib import Path

from resume_pipeline.conversion.converter import ConversionOutcome, DocumentConverter
from resume_pipeline.experience.calculator import ExperienceCalculator
from resume_pipeline.extraction.models import DraftSource
from resume_pipeline.extraction.structured_extractor import StructuredExtractor
from resume_pipeline.logging.logger import Log
from resume_pipeline.ocr.ocr_fallback import OcrFallback
from resume_pipeline.pdf.text_extractor import (
    MIN_TEXT_LENGTH,
    ExtractedText,
    Provenance,
    TextExtractor,
)
from resume_pipeline.processor.exceptions import FatalInputError
from resume_pipeline.processor.models import NormalizedResume, ResumeStatus
from resume_pipeline.processor.pipeline import PipelineContext, PipelineStep
from resume_pipeline.sanitization.sanitizer import clean

_NAME_SEPARATORS_RE = re.compile(r"[_\-]+")


def name_from_filename(original_name: str) -> str:
    """``john_doe-resume.pdf`` -> ``John Doe Resume``."""
    stem = Path(original_name).stem
    words = _NAME_SEPARATORS_RE.sub(" ", stem).split()
    return " ".join(w[:1].upper() + w[1:].lower() for w in words)


def file_information(original_name: str, extension: str, uploaded_at: datetime) -> str:
    return (
        "\n\nFile Information:\n"
        f"Filename: {original_name}\n"
        f"File type: {extension}\n"
        f"Uploaded: {uploaded_at.isoformat()}\n"
    )


def placeholder_text(extension: str) -> str:
    return f"This appears to be a {extension.upper()} document that couldn't be fully parsed."


def error_record(context: PipelineContext) -> NormalizedResume:
    """Record for a document the pipeline could not process at all."""
    document = context.document
    return NormalizedResume(
        id=document.id,
        original_name=clean(document.original_name),
        uploaded_at=document.uploaded_at,
        status=ResumeStatus.ERROR,
        total_experience="Unknown",
        name=name_from_filename(clean(document.original_name)),
        error_message=clean(context.error_message),
        processing_started_at=context.started_at,
        processing_completed_at=datetime.now(timezone.utc),
    )


class ValidateInputStep(PipelineStep):
    name = "validate_input"

    def run(self, context: PipelineContext) -> PipelineContext:
        document = context.document
        if not document.data:
            raise FatalInputError(f"Document '{document.original_name}' has no content")
        context.pdf_bytes = document.data
        return context


class ConvertDocumentStep(PipelineStep):
    """DOC/DOCX to PDF. Other extensions are treated as PDF and pass through."""

    name = "convert_document"

    def __init__(self, converter: DocumentConverter, scratch_dir: Path | None = None) -> None:
        self._converter = converter
        self._scratch_dir = scratch_dir

    def run(self, context: PipelineContext) -> PipelineContext:
        document = context.document
        result = self._converter.convert(
            context.pdf_bytes,
            document.extension,
            original_name=document.original_name,
            scratch_dir=self._scratch_dir,
        )
        context.pdf_bytes = result.pdf_bytes
        if result.outcome is ConversionOutcome.PLACEHOLDER:
            context.failures.append("conversion")
        return context


class ExtractTextStep(PipelineStep):
    name = "extract_text"

    def __init__(self, text_extractor: TextExtractor) -> None:
        self._text_extractor = text_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.extracted = self._text_extractor.extract(context.pdf_bytes)
        context.text = context.extracted.content
        if context.extracted.provenance is Provenance.FALLBACK:
            context.failures.append("extraction")
        Log.info(
            f"Extracted {len(context.text)} chars from document {context.document.id} "
            f"({context.extracted.provenance.value})"
        )
        return context


class OcrFallbackStep(PipelineStep):
    """Runs OCR only when the extracted text is too short to be useful."""

    name = "ocr_fallback"

    def __init__(self, ocr: OcrFallback) -> None:
        self._ocr = ocr

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.extracted is not None and context.extracted.is_sufficient:
            return context
        Log.info(
            f"Text extraction insufficient for document {context.document.id} "
            f"({len(context.text)} chars), attempting OCR"
        )
        ocr_text = self._ocr.recognize_pdf(context.pdf_bytes)
        if len(ocr_text.strip()) > len(context.text.strip()):
            context.text = ocr_text
            context.extracted = ExtractedText(content=ocr_text, provenance=Provenance.OCR)
            Log.info(f"OCR produced {len(ocr_text)} chars for document {context.document.id}")
        else:
            context.failures.append("recognition")
        return context


class AnnotateTextStep(PipelineStep):
    """Appends file metadata; replaces unusably short text with a placeholder sentence."""

    name = "annotate_text"

    def run(self, context: PipelineContext) -> PipelineContext:
        document = context.document
        extension = document.extension.lower().lstrip(".") or "pdf"
        info = file_information(document.original_name, extension, document.uploaded_at)
        if len(context.text.strip()) < MIN_TEXT_LENGTH:
            context.text = placeholder_text(extension) + info
        else:
            context.text = context.text + info
        return context


class StructuredExtractStep(PipelineStep):
    name = "structured_extract"

    def __init__(self, structured_extractor: StructuredExtractor) -> None:
        self._structured_extractor = structured_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        draft, source = self._structured_extractor.extract_with_source(context.text)
        context.draft = draft
        context.draft_source = source
        if source is DraftSource.REGEX:
            context.failures.append("structured_extraction")
        return context


class CalculateExperienceStep(PipelineStep):
    name = "calculate_experience"

    def __init__(self, calculator: ExperienceCalculator) -> None:
        self._calculator = calculator

    def run(self, context: PipelineContext) -> PipelineContext:
        context.total_experience = self._calculator.calculate(context.draft.experience)
        Log.info(
            f"Total experience for document {context.document.id}: {context.total_experience}"
        )
        return context


class AssembleResumeStep(PipelineStep):
    name = "assemble"

    def run(self, context: PipelineContext) -> PipelineContext:
        document = context.document
        draft = context.draft.sanitized()
        original_name = clean(document.original_name)
        provenance = context.extracted.provenance.value if context.extracted else ""
        context.result = NormalizedResume(
            id=document.id,
            original_name=original_name,
            uploaded_at=document.uploaded_at,
            status=ResumeStatus.PROCESSED,
            total_experience=clean(context.total_experience) or "Unknown",
            name=draft.name or name_from_filename(original_name),
            email=draft.email,
            phone=draft.phone,
            location=draft.location,
            title=draft.title,
            summary=draft.summary,
            skills=draft.skills,
            experience=draft.experience,
            education=draft.education,
            education_details=draft.education_details,
            certifications=draft.certifications,
            languages=draft.languages,
            experience_level=draft.experience_level,
            extracted_text=clean(context.text),
            text_provenance=provenance,
            draft_source=context.draft_source.value,
            processing_started_at=context.started_at,
            processing_completed_at=datetime.now(timezone.utc),
        )
        return context
