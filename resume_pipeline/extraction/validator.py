"""Validates a parsed completion and coerces it into a StructuredResumeDraft.

Coercion is lenient: ``null`` becomes empty, numbers become strings, list items
that are not of the expected kind are dropped and unknown keys are ignored. A
structural mismatch yields ``DraftError``.
"""

from typing import Any

from resume_pipeline.extraction.exceptions import DraftValidationError
from resume_pipeline.extraction.models import (
    DraftError,
    DraftOk,
    DraftResult,
    EducationDetail,
    Experience,
    StructuredResumeDraft,
)

_SCALAR_FIELDS = {
    "name": "name",
    "email": "email",
    "phone": "phone",
    "location": "location",
    "title": "title",
    "summary": "summary",
    "experienceLevel": "experience_level",
}
_STRING_LIST_FIELDS = {
    "skills": "skills",
    "education": "education",
    "certifications": "certifications",
    "languages": "languages",
}
_OBJECT_LIST_FIELDS = {
    "experience": "experience",
    "educationDetails": "education_details",
}


def validate_and_coerce(data: Any) -> DraftResult:
    """Build a draft from parsed JSON. Never raises."""
    try:
        return DraftOk(draft=validate_and_build(data))
    except DraftValidationError as exc:
        return DraftError(reason=str(exc))


def validate_and_build(data: Any) -> StructuredResumeDraft:
    """Validate parsed JSON and build a StructuredResumeDraft.

    Both camelCase and snake_case keys are accepted.

    Raises:
        DraftValidationError: on a structural mismatch.
    """
    if not isinstance(data, dict):
        raise DraftValidationError("Completion payload must be an object")

    values: dict[str, Any] = {}
    for fields in (_SCALAR_FIELDS, _STRING_LIST_FIELDS, _OBJECT_LIST_FIELDS):
        for key, attr in fields.items():
            if key in data:
                values[attr] = data[key]
            elif attr in data:
                values[attr] = data[attr]
    if not values:
        raise DraftValidationError("Completion payload has none of the résumé fields")

    kwargs: dict[str, Any] = {}
    for attr in _SCALAR_FIELDS.values():
        kwargs[attr] = _build_scalar(values.get(attr), attr)
    for attr in _STRING_LIST_FIELDS.values():
        kwargs[attr] = _build_string_list(values.get(attr), attr)
    kwargs["experience"] = [
        _build_experience(item) for item in _require_list(values.get("experience"), "experience")
        if isinstance(item, dict)
    ]
    kwargs["education_details"] = [
        _build_education_detail(item)
        for item in _require_list(values.get("education_details"), "education_details")
        if isinstance(item, dict)
    ]
    return StructuredResumeDraft(**kwargs)


def _build_scalar(raw: Any, field: str) -> str:
    if raw is None:
        return ""
    if isinstance(raw, bool):
        return str(raw).lower()
    if isinstance(raw, (int, float)):
        return str(raw)
    if isinstance(raw, str):
        return raw
    raise DraftValidationError(f"'{field}' must be a string, got {type(raw).__name__}")


def _require_list(raw: Any, field: str) -> list[Any]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise DraftValidationError(f"'{field}' must be a list, got {type(raw).__name__}")
    return raw


def _build_string_list(raw: Any, field: str) -> list[str]:
    items = []
    for item in _require_list(raw, field):
        if isinstance(item, bool):
            continue
        if isinstance(item, (int, float)):
            items.append(str(item))
        elif isinstance(item, str):
            items.append(item)
    return items


def _lenient(raw: Any) -> str:
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return str(raw)
    return ""


def _build_experience(raw: dict[str, Any]) -> Experience:
    return Experience(
        title=_lenient(raw.get("title")),
        company=_lenient(raw.get("company")),
        duration=_lenient(raw.get("duration")),
        description=_lenient(raw.get("description")),
    )


def _build_education_detail(raw: dict[str, Any]) -> EducationDetail:
    return EducationDetail(
        degree=_lenient(raw.get("degree")),
        institution=_lenient(raw.get("institution")),
        year=_lenient(raw.get("year")),
    )
