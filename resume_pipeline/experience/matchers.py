"""Duration matchers for free-text work-history durations.

Each matcher takes a normalized duration string and today's date and returns
the number of months it describes, or ``None`` when the string is not in the
matcher's format. A negative result means the format was recognized but the
range runs backwards; the calculator discards such entries.

``MATCHERS`` lists them in priority order. The first non-``None`` result wins.
"""

import re
from collections.abc import Callable
from datetime import date

DurationMatcher = Callable[[str, date], int | None]

_MONTHS: dict[str, int] = {
    "january": 1, "jan": 1,
    "february": 2, "feb": 2,
    "march": 3, "mar": 3,
    "april": 4, "apr": 4,
    "may": 5,
    "june": 6, "jun": 6,
    "july": 7, "jul": 7,
    "august": 8, "aug": 8,
    "september": 9, "sep": 9, "sept": 9,
    "october": 10, "oct": 10,
    "november": 11, "nov": 11,
    "december": 12, "dec": 12,
}

_ONGOING = r"present|current|currently|now|date|today|ongoing"
_ONGOING_RE = re.compile(rf"^(?:{_ONGOING})$", re.IGNORECASE)
_SEP = r"\s*(?:-|to|until|till)\s*"

_YEARS_UNIT_RE = re.compile(r"\b(\d+(?:\.\d+)?)\s*(?:years?|yrs?|y)\b", re.IGNORECASE)
_MONTHS_UNIT_RE = re.compile(
    r"\b(\d+(?:\.\d+)?)\s*(?:months?|mos?|mons?|m)\b", re.IGNORECASE
)
_WORDED_RANGE_RE = re.compile(
    rf"([a-z]+\.?\s+\d{{4}}){_SEP}([a-z]+\.?\s+\d{{4}}|{_ONGOING})\b",
    re.IGNORECASE,
)
_YEAR_RANGE_RE = re.compile(
    rf"(?<![\d/.-])(\d{{4}}){_SEP}(\d{{4}}|{_ONGOING})\b(?![/.-]\d)",
    re.IGNORECASE,
)
_NUMERIC_RANGE_RE = re.compile(
    rf"\b(\d{{1,2}})[/.-](\d{{4}}){_SEP}(?:(\d{{1,2}})[/.-](\d{{4}})|({_ONGOING}))\b",
    re.IGNORECASE,
)
_SINGLE_WORDED_RE = re.compile(r"^([a-z]+\.?\s+\d{4})$", re.IGNORECASE)
_SINGLE_YEAR_RE = re.compile(r"^(\d{4})$")
_ANY_YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")
_BARE_NUMBER_RE = re.compile(r"^(\d+(?:\.\d+)?)$")
_QUALIFIED_RE = re.compile(
    r"(?:(?:over|more than|about|approximately|approx\.?|around|nearly|almost|"
    r"at least|roughly)\s+(\d+(?:\.\d+)?)\s*\+?|(\d+(?:\.\d+)?)\s*\+)"
    r"\s*(?:years?|yrs?)\b",
    re.IGNORECASE,
)


def months_between(start_year: int, start_month: int, end_year: int, end_month: int) -> int:
    return (end_year - start_year) * 12 + (end_month - start_month)


def month_index(name: str) -> int | None:
    """Map a month name or abbreviation to 1-12."""
    key = name.lower().rstrip(".")
    if key in _MONTHS:
        return _MONTHS[key]
    return _MONTHS.get(key[:3])


def parse_worded_date(text: str) -> tuple[int, int] | None:
    """Parse ``"Month YYYY"`` into ``(year, month)``."""
    parts = text.split()
    if len(parts) < 2 or not parts[-1].isdigit():
        return None
    month = month_index(parts[0])
    if month is None:
        return None
    return int(parts[-1]), month


def _is_ongoing(token: str) -> bool:
    return bool(_ONGOING_RE.match(token.strip()))


def match_explicit_units(text: str, today: date) -> int | None:
    """``"2 years 3 months"``, ``"18 months"``, ``"1.5 yrs"``."""
    years = _YEARS_UNIT_RE.search(text)
    months = _MONTHS_UNIT_RE.search(text)
    if years is None and months is None:
        return None
    total = 0.0
    if years is not None:
        total += float(years.group(1)) * 12
    if months is not None:
        total += float(months.group(1))
    return round(total)


def match_worded_range(text: str, today: date) -> int | None:
    """``"Jan 2018 - Dec 2020"``, ``"March 2019 to Present"``."""
    match = _WORDED_RANGE_RE.search(text)
    if match is None:
        return None
    start = parse_worded_date(match.group(1))
    if start is None:
        return None
    if _is_ongoing(match.group(2)):
        end = (today.year, today.month)
    else:
        end = parse_worded_date(match.group(2))
        if end is None:
            return None
    return months_between(start[0], start[1], end[0], end[1])


def match_year_range(text: str, today: date) -> int | None:
    """``"2015 - 2017"``, ``"2019 to present"``. Year granularity only."""
    match = _YEAR_RANGE_RE.search(text)
    if match is None:
        return None
    start_year = int(match.group(1))
    end_token = match.group(2)
    end_year = today.year if _is_ongoing(end_token) else int(end_token)
    return (end_year - start_year) * 12


def match_numeric_range(text: str, today: date) -> int | None:
    """``"01/2018 - 03/2020"``, ``"6-2019 - present"``."""
    match = _NUMERIC_RANGE_RE.search(text)
    if match is None:
        return None
    start_month, start_year = int(match.group(1)), int(match.group(2))
    if match.group(5):
        end_month, end_year = today.month, today.year
    else:
        end_month, end_year = int(match.group(3)), int(match.group(4))
    if not (1 <= start_month <= 12 and 1 <= end_month <= 12):
        return None
    return months_between(start_year, start_month, end_year, end_month)


def match_single_worded_date(text: str, today: date) -> int | None:
    """``"June 2021"``: an open range that is still running."""
    match = _SINGLE_WORDED_RE.match(text)
    if match is None:
        return None
    start = parse_worded_date(match.group(1))
    if start is None:
        return None
    return months_between(start[0], start[1], today.year, today.month)


def match_single_year(text: str, today: date) -> int | None:
    """``"2020"``: assumed to run from January of that year until today."""
    match = _SINGLE_YEAR_RE.match(text)
    if match is None:
        return None
    return months_between(int(match.group(1)), 1, today.year, today.month)


def match_any_two_years(text: str, today: date) -> int | None:
    """Last resort for ranges: first and last plausible year in the string."""
    years = _ANY_YEAR_RE.findall(text)
    if len(years) < 2:
        return None
    return (int(years[-1]) - int(years[0])) * 12


def match_bare_number(text: str, today: date) -> int | None:
    """``"3"`` or ``"2.5"`` read as a number of years."""
    match = _BARE_NUMBER_RE.match(text)
    if match is None:
        return None
    years = float(match.group(1))
    if years <= 0:
        return None
    return round(years * 12)


def match_qualified_years(text: str, today: date) -> int | None:
    """``"over 5 years"``, ``"10+ years"``: the count is taken as a lower bound."""
    match = _QUALIFIED_RE.search(text)
    if match is None:
        return None
    years = float(match.group(1) or match.group(2))
    if years <= 0:
        return None
    return round(years * 12)


MATCHERS: tuple[DurationMatcher, ...] = (
    match_explicit_units,
    match_worded_range,
    match_year_range,
    match_numeric_range,
    match_single_worded_date,
    match_single_year,
    match_any_two_years,
    match_bare_number,
    match_qualified_years,
)
