from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from resume_pipeline.extraction.models import EducationDetail, Experience


class ResumeStatus(str, Enum):
    PROCESSED = "Processed"
    ERROR = "Error"


@dataclass(frozen=True)
class RawDocument:
    """One uploaded résumé as handed to the pipeline. ``data`` may be empty."""

    id: str
    original_name: str
    data: bytes | None
    extension: str
    uploaded_at: datetime


@dataclass(frozen=True)
class NormalizedResume:
    """Final pipeline output for one document."""

    id: str
    original_name: str
    uploaded_at: datetime
    status: ResumeStatus
    total_experience: str
    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    title: str = ""
    summary: str = ""
    skills: list[str] = field(default_factory=list)
    experience: list[Experience] = field(default_factory=list)
    education: list[str] = field(default_factory=list)
    education_details: list[EducationDetail] = field(default_factory=list)
    certifications: list[str] = field(default_factory=list)
    languages: list[str] = field(default_factory=list)
    experience_level: str = ""
    extracted_text: str = ""
    text_provenance: str = ""
    draft_source: str = ""
    error_message: str = ""
    processing_started_at: datetime | None = None
    processing_completed_at: datetime | None = None

    def to_payload(self) -> dict[str, object]:
        """JSON-ready dict with camelCase keys."""
        return {
            "id": self.id,
            "originalName": self.original_name,
            "uploadedAt": _iso(self.uploaded_at),
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "location": self.location,
            "title": self.title,
            "summary": self.summary,
            "skills": list(self.skills),
            "experience": [
                {
                    "title": e.title,
                    "company": e.company,
                    "duration": e.duration,
                    "description": e.description,
                }
                for e in self.experience
            ],
            "education": list(self.education),
            "educationDetails": [
                {"degree": d.degree, "institution": d.institution, "year": d.year}
                for d in self.education_details
            ],
            "certifications": list(self.certifications),
            "languages": list(self.languages),
            "experienceLevel": self.experience_level,
            "totalExperience": self.total_experience,
            "status": self.status.value,
            "extractedText": self.extracted_text,
            "textProvenance": self.text_provenance,
            "draftSource": self.draft_source,
            "errorMessage": self.error_message,
            "processingStartedAt": _iso(self.processing_started_at),
            "processingCompletedAt": _iso(self.processing_completed_at),
        }


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None
