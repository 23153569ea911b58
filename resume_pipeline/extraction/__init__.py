from resume_pipeline.extraction.factory import CompletionClientFactory
from resume_pipeline.extraction.models import StructuredResumeDraft
from resume_pipeline.extraction.structured_extractor import StructuredExtractor

__all__ = ["CompletionClientFactory", "StructuredExtractor", "StructuredResumeDraft"]
