"""Deterministic résumé field extraction.

Used on its own when the completion call fails, and to fill fields the model
left empty. Every pattern family is tried in priority order and the first hit
wins.
"""

import re

from resume_pipeline.extraction import skills_vocabulary
from resume_pipeline.extraction.models import (
    EducationDetail,
    Experience,
    StructuredResumeDraft,
)

_HEADINGS = (
    "summary", "professional summary", "profile", "objective", "about", "about me",
    "experience", "work experience", "professional experience", "employment history",
    "education", "skills", "technical skills", "certifications", "certificates",
    "languages", "projects", "file information",
)
_HEADING_RE = re.compile(
    r"^\s*(" + "|".join(re.escape(h) for h in sorted(_HEADINGS, key=len, reverse=True))
    + r")\b\s*:?\s*(.*)$",
    re.IGNORECASE,
)

_NAME_PATTERNS = (
    re.compile(r"(?i:\bname)\s*:?\s*([A-Z][a-z]+(?: [A-Z][a-z]+)+)"),
    re.compile(r"(?i:\b(?:cv|resume|résumé|curriculum vitae) of)\s+([A-Z][a-z]+(?: [A-Z][a-z]+)+)"),
    re.compile(r"^([A-Z][a-z]+(?: [A-Z][a-z]+){1,2})$", re.MULTILINE),
    re.compile(r"\b([A-Z][a-z]+ [A-Z][a-z]+)\b"),
    re.compile(r"\b([A-Z][a-z]+ [A-Z]\. [A-Z][a-z]+)\b"),
)

_EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")

_PHONE_PATTERNS = (
    re.compile(r"(?:\+\d{1,3}[-. ]?)?\(\d{3}\)[-. ]?\d{3}[-. ]?\d{4}\b"),
    re.compile(r"\b\d{10}\b"),
    re.compile(r"\b\d{3}[-.]\d{3}[-.]\d{4}\b"),
    re.compile(r"(?i:\b(?:phone|tel|mobile|cell))\s*:?\s*([+\d() .-]{7,})"),
    re.compile(r"\+\d{1,3}[-. ]?\d{1,4}[-. ]?\d{3,4}[-. ]?\d{3,4}\b"),
)

_LOCATION_PATTERNS = (
    re.compile(r"(?i:\b(?:address|location|based in))\s*:?[ \t]*([^\n]+)"),
    re.compile(r"\b([A-Z][A-Za-z.'-]*(?: [A-Z][A-Za-z.'-]*)*, [A-Z]{2} \d{5}(?:-\d{4})?)\b"),
)

_DEGREE_RE = re.compile(
    r"(?<![A-Za-z])(?:B\.S\.|B\.A\.|M\.S\.|M\.A\.|Ph\.D\.?|PhD|BS|BA|MS|MA|MBA|BSc|MSc|BEng|MEng"
    r"|(?:Bachelor|Master|Doctor)(?:'s)?(?: of [A-Z][a-z]+(?: [A-Z][a-z]+)*)?)(?![A-Za-z])"
)
_INSTITUTION_OF_RE = re.compile(
    r"\b(?:University|College|Institute|School) of [A-Z][A-Za-z&]*(?: (?:of |and |& )?[A-Z][A-Za-z&]*)*"
)
_INSTITUTION_RE = re.compile(
    r"(?:[A-Z][A-Za-z.&'-]* )*(?:University|College|Institute|School)(?: (?:of )?[A-Z][A-Za-z.&'-]*)*"
)
_YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")

_TITLE_PATTERNS = (
    re.compile(
        r"\b(?:(?:Senior|Lead|Principal|Staff|Junior|Associate) )?"
        r"(?:(?:Software|Frontend|Backend|Full Stack|DevOps|Cloud|Data|Machine Learning|AI"
        r"|Mobile|Web|UI/UX|QA|Test) )?"
        r"(?:Engineer|Developer|Architect|Scientist|Analyst|Manager|Director|Specialist|Designer)\b"
    ),
    re.compile(r"\b(?:CTO|CEO|CIO|CFO|COO|VP of [A-Z][a-z]+)\b"),
    re.compile(r"(?i:\b(?:title|position|role))\s*:[ \t]*([^\n]+)"),
)

_SUMMARY_HEADINGS = ("summary", "professional summary", "profile", "objective", "about", "about me")
_EXPERIENCE_HEADINGS = ("experience", "work experience", "professional experience", "employment history")
_SUMMARY_MAX_LINES = 4
_SECTION_END_BLANKS = 2

_DATE_TOKEN = r"(?:(?:[A-Za-z]{3,9}\.? )?\d{4}|\d{1,2}/\d{4})"
_DATE_RANGE_RE = re.compile(
    rf"{_DATE_TOKEN}\s*(?:-|–|—|to)\s*(?:{_DATE_TOKEN}|present|current|now)",
    re.IGNORECASE,
)
_PART_SPLIT_RE = re.compile(r"\s*(?:,|\||\s-\s|–|—)\s*")
_LIST_SPLIT_RE = re.compile(r"[,;•|\n]")
_BULLET_RE = re.compile(r"^[\s\-*•·]+")

_YEARS_MENTION_RE = re.compile(r"\b(\d{1,2})\+?\s*(?:years|yrs)\b", re.IGNORECASE)
_SENIOR_RE = re.compile(r"\b(?:senior|lead|principal|staff|architect|manager|director)\b", re.IGNORECASE)
_ENTRY_RE = re.compile(r"\b(?:junior|entry|graduate|intern|trainee)\b", re.IGNORECASE)

_FILE_INFO_RE = re.compile(r"\n*File Information:\n.*\Z", re.DOTALL)

ENTRY_LEVEL = "Entry Level"
MID_LEVEL = "Mid Level"
SENIOR = "Senior"
EXECUTIVE = "Executive"


def _first_match(patterns: tuple[re.Pattern[str], ...], text: str) -> str:
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return (match.group(1) if match.groups() else match.group(0)).strip()
    return ""


def _section(text: str, names: tuple[str, ...]) -> list[str]:
    """Lines under the first heading in ``names``, up to the next heading.

    Inline content on the heading line itself (``Skills: Python, SQL``) is included.
    Single blank lines separate entries inside a section; two in a row end it.
    """
    lines = text.splitlines()
    for index, line in enumerate(lines):
        heading = _HEADING_RE.match(line)
        if heading is None or heading.group(1).lower() not in names:
            continue
        collected = [heading.group(2).strip()] if heading.group(2).strip() else []
        blank_run = 0
        for following in lines[index + 1:]:
            if _HEADING_RE.match(following):
                break
            if not following.strip():
                blank_run += 1
                if collected and blank_run >= _SECTION_END_BLANKS:
                    break
                continue
            blank_run = 0
            collected.append(following.strip())
        return collected
    return []


def _split_list(lines: list[str]) -> list[str]:
    items = []
    for chunk in _LIST_SPLIT_RE.split("\n".join(lines)):
        item = _BULLET_RE.sub("", chunk).strip(" .")
        if item and item not in items:
            items.append(item)
    return items


def extract_name(text: str) -> str:
    return _first_match(_NAME_PATTERNS, text)


def extract_email(text: str) -> str:
    match = _EMAIL_RE.search(text)
    return match.group(0) if match else ""


def extract_phone(text: str) -> str:
    return _first_match(_PHONE_PATTERNS, text)


def extract_location(text: str) -> str:
    return _first_match(_LOCATION_PATTERNS, text)


def extract_skills(text: str) -> list[str]:
    """Vocabulary hits inside the Skills section first, then the whole document."""
    skills = skills_vocabulary.find_skills("\n".join(_section(text, ("skills", "technical skills"))))
    for skill in skills_vocabulary.find_skills(text):
        if skill not in skills:
            skills.append(skill)
    return skills


def extract_education(text: str) -> list[str]:
    education: list[str] = []
    section = "\n".join(_section(text, ("education",)))
    for source in (section, text):
        for match in _DEGREE_RE.finditer(source):
            if match.group(0) not in education:
                education.append(match.group(0))
    for match in _INSTITUTION_OF_RE.finditer(text):
        if match.group(0) not in education:
            education.append(match.group(0))
    return education


def extract_education_details(text: str) -> list[EducationDetail]:
    """Lines naming a degree together with a year, plus the institution when present."""
    details = []
    for line in text.splitlines():
        degree = _DEGREE_RE.search(line)
        year = _YEAR_RE.findall(line)
        if degree is None or not year:
            continue
        institution = _INSTITUTION_RE.search(line)
        details.append(
            EducationDetail(
                degree=degree.group(0),
                institution=institution.group(0).strip() if institution else "",
                year=year[-1],
            )
        )
    return details


def extract_title(text: str) -> str:
    return _first_match(_TITLE_PATTERNS, text)


def extract_summary(text: str) -> str:
    labeled = _section(text, _SUMMARY_HEADINGS)
    if labeled:
        return " ".join(labeled[:_SUMMARY_MAX_LINES])
    if len(text) <= 100:
        return ""
    first_paragraph = re.split(r"\n\s*\n", text.strip(), maxsplit=1)[0].strip()
    if 50 < len(first_paragraph) < 500:
        return first_paragraph
    return text.strip()[:200] + "..."


def _experience_from_line(line: str) -> Experience | None:
    date_range = _DATE_RANGE_RE.search(line)
    if date_range is None:
        return None
    remainder = (line[: date_range.start()] + " " + line[date_range.end():]).strip(" ,|()-–—")
    company, title = "", ""
    if " at " in remainder:
        title, company = (p.strip(" ,|-") for p in remainder.split(" at ", 1))
    else:
        parts = [p for p in _PART_SPLIT_RE.split(remainder) if p]
        if parts:
            company = parts[0]
        if len(parts) > 1:
            title = parts[1]
    return Experience(title=title, company=company, duration=date_range.group(0))


def extract_experience(text: str) -> list[Experience]:
    """Entries from Experience-section lines that carry a date range.

    Lines following an entry, up to the next dated line, become its description.
    """
    entries: list[Experience] = []
    description: list[str] = []
    for line in _section(text, _EXPERIENCE_HEADINGS):
        entry = _experience_from_line(line)
        if entry is None:
            if entries:
                description.append(_BULLET_RE.sub("", line))
            continue
        if entries and description:
            entries[-1] = _with_description(entries[-1], description)
        description = []
        entries.append(entry)
    if entries and description:
        entries[-1] = _with_description(entries[-1], description)
    return entries


def _with_description(entry: Experience, lines: list[str]) -> Experience:
    return Experience(
        title=entry.title,
        company=entry.company,
        duration=entry.duration,
        description=" ".join(lines),
    )


def extract_certifications(text: str) -> list[str]:
    return _split_list(_section(text, ("certifications", "certificates")))


def extract_languages(text: str) -> list[str]:
    return _split_list(_section(text, ("languages",)))


def level_for_years(years: int) -> str:
    if years <= 2:
        return ENTRY_LEVEL
    if years <= 5:
        return MID_LEVEL
    if years <= 10:
        return SENIOR
    return EXECUTIVE


def extract_experience_level(text: str) -> str:
    years = [int(y) for y in _YEARS_MENTION_RE.findall(text)]
    if years and max(years) > 0:
        return level_for_years(max(years))
    if _SENIOR_RE.search(text):
        return SENIOR
    if _ENTRY_RE.search(text):
        return ENTRY_LEVEL
    return ""


class RegexExtractor:
    """Builds a StructuredResumeDraft from text with pattern matching alone."""

    def extract(self, text: str) -> StructuredResumeDraft:
        text = _FILE_INFO_RE.sub("", text or "")
        if not text.strip():
            return StructuredResumeDraft()
        draft = StructuredResumeDraft(
            name=extract_name(text),
            email=extract_email(text),
            phone=extract_phone(text),
            location=extract_location(text),
            title=extract_title(text),
            summary=extract_summary(text),
            skills=extract_skills(text),
            experience=extract_experience(text),
            education=extract_education(text),
            education_details=extract_education_details(text),
            certifications=extract_certifications(text),
            languages=extract_languages(text),
            experience_level=extract_experience_level(text),
        )
        return draft.sanitized()
