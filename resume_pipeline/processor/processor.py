from collections.abc import Sequence
from datetime import datetime, timezone
from pathlib import Path

from resume_pipeline.config.settings import Settings
from resume_pipeline.conversion.converter import DocumentConverter
from resume_pipeline.conversion.factory import RendererFactory
from resume_pipeline.experience.calculator import ExperienceCalculator
from resume_pipeline.extraction.factory import CompletionClientFactory
from resume_pipeline.logging.logger import Log
from resume_pipeline.ocr.factory import OcrEngineFactory
from resume_pipeline.pdf.factory import PdfExtractorFactory
from resume_pipeline.processor.exceptions import FatalInputError
from resume_pipeline.processor.models import NormalizedResume, RawDocument
from resume_pipeline.processor.pipeline import PipelineContext, PipelineStep
from resume_pipeline.processor.steps import (
    AnnotateTextStep,
    AssembleResumeStep,
    CalculateExperienceStep,
    ConvertDocumentStep,
    ExtractTextStep,
    OcrFallbackStep,
    StructuredExtractStep,
    ValidateInputStep,
    error_record,
)


class Processor:
    """Runs the résumé pipeline steps over one document at a time.

    Pipeline: validate -> convert -> extract -> OCR -> annotate -> structure
    -> experience -> assemble.

    A ``FatalInputError`` ends the run with an ``Error`` record. Any other
    exception from a step is logged, recorded as ``step:<name>`` and the next
    step runs. ``BaseException`` is not caught.
    """

    def __init__(self, steps: Sequence[PipelineStep]) -> None:
        self._steps = list(steps)

    def process(self, document: RawDocument) -> NormalizedResume:
        Log.info(f"Processing document {document.id} ({document.original_name})")
        context = PipelineContext(document=document, started_at=datetime.now(timezone.utc))

        for step in self._steps:
            try:
                context = step.run(context)
            except FatalInputError as exc:
                context.fatal = True
                context.error_message = str(exc)
                Log.error(f"Document {document.id} failed: {exc}")
                break
            except Exception as exc:
                context.failures.append(f"step:{step.name}")
                Log.error(f"Step {step.name} failed for document {document.id}: {exc}")

        if context.fatal:
            return error_record(context)
        if context.failures:
            Log.warning(f"Document {document.id} degraded: {', '.join(context.failures)}")
        if context.result is None:
            context.error_message = "Pipeline produced no result"
            return error_record(context)
        Log.info(f"Document {document.id} processed")
        return context.result


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required adapters."""
    scratch_dir = Path(settings.scratch_dir) if settings.scratch_dir else None
    converter = DocumentConverter(renderer=RendererFactory.create(settings))
    return Processor(
        steps=[
            ValidateInputStep(),
            ConvertDocumentStep(converter, scratch_dir=scratch_dir),
            ExtractTextStep(PdfExtractorFactory.create_text_extractor(settings)),
            OcrFallbackStep(OcrEngineFactory.create_fallback(settings)),
            AnnotateTextStep(),
            StructuredExtractStep(CompletionClientFactory.create_extractor(settings)),
            CalculateExperienceStep(ExperienceCalculator()),
            AssembleResumeStep(),
        ]
    )
