from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime

from resume_pipeline.extraction.models import DraftSource, StructuredResumeDraft
from resume_pipeline.pdf.text_extractor import ExtractedText
from resume_pipeline.processor.models import NormalizedResume, RawDocument


@dataclass(slots=True)
class PipelineContext:
    document: RawDocument
    started_at: datetime
    pdf_bytes: bytes = b""
    extracted: ExtractedText | None = None
    text: str = ""
    draft: StructuredResumeDraft = field(default_factory=StructuredResumeDraft)
    draft_source: DraftSource = DraftSource.REGEX
    total_experience: str = ""
    failures: list[str] = field(default_factory=list)
    fatal: bool = False
    error_message: str = ""
    result: NormalizedResume | None = None


class PipelineStep(ABC):
    name: str = "step"

    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
