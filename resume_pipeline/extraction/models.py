from dataclasses import dataclass, field, replace
from enum import Enum

from resume_pipeline.sanitization.sanitizer import clean, clean_list


@dataclass(frozen=True)
class Experience:
    """One work-history entry."""

    title: str = ""
    company: str = ""
    duration: str = ""
    description: str = ""

    def sanitized(self) -> "Experience":
        return Experience(
            title=clean(self.title),
            company=clean(self.company),
            duration=clean(self.duration),
            description=clean(self.description),
        )

    def is_empty(self) -> bool:
        return not (self.title or self.company or self.duration or self.description)


@dataclass(frozen=True)
class EducationDetail:
    degree: str = ""
    institution: str = ""
    year: str = ""

    def sanitized(self) -> "EducationDetail":
        return EducationDetail(
            degree=clean(self.degree),
            institution=clean(self.institution),
            year=clean(self.year),
        )

    def is_empty(self) -> bool:
        return not (self.degree or self.institution or self.year)


@dataclass(frozen=True)
class StructuredResumeDraft:
    """Structured résumé fields. Every field defaults to empty, never ``None``."""

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

    def sanitized(self) -> "StructuredResumeDraft":
        """Copy with every string cleaned and empty list entries dropped."""
        experience = [e.sanitized() for e in self.experience]
        details = [d.sanitized() for d in self.education_details]
        return replace(
            self,
            name=clean(self.name),
            email=clean(self.email),
            phone=clean(self.phone),
            location=clean(self.location),
            title=clean(self.title),
            summary=clean(self.summary),
            skills=clean_list(self.skills),
            experience=[e for e in experience if not e.is_empty()],
            education=clean_list(self.education),
            education_details=[d for d in details if not d.is_empty()],
            certifications=clean_list(self.certifications),
            languages=clean_list(self.languages),
            experience_level=clean(self.experience_level),
        )


class DraftSource(str, Enum):
    LLM = "llm"
    REGEX = "regex"
    MERGED = "merged"


@dataclass(frozen=True)
class DraftOk:
    draft: StructuredResumeDraft


@dataclass(frozen=True)
class DraftError:
    reason: str


DraftResult = DraftOk | DraftError
