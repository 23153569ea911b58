"""Total work experience from free-text durations.

Duration text comes from thousands of different authors and from the LLM, so
there is no canonical format. Each entry is run through the ordered matchers in
``matchers.MATCHERS``; when nothing can be parsed at all, the total falls back
to an estimate of ``ESTIMATED_MONTHS_PER_ENTRY`` per entry.
"""

import re
from collections.abc import Callable, Iterable, Mapping
from datetime import date

from resume_pipeline.experience.matchers import MATCHERS, DurationMatcher
from resume_pipeline.experience.models import ExperiencePeriod
from resume_pipeline.logging.logger import Log

ESTIMATED_MONTHS_PER_ENTRY = 24
NO_ENTRIES = "0 years"
UNKNOWN = "Unknown"

_DASHES_RE = re.compile(r"[\u2010-\u2015\u2212]")
_SPACES_RE = re.compile(r"\s+")


def normalize_duration(raw: str) -> str:
    """Commas to spaces, unicode dashes to ``-``, collapsed whitespace."""
    text = raw.replace(",", " ")
    text = _DASHES_RE.sub("-", text)
    return _SPACES_RE.sub(" ", text).strip()


def format_months(total_months: int) -> str:
    """Render a month count as ``"2 years 3 months"``, omitting a zero unit."""
    years, months = divmod(total_months, 12)
    year_part = f"{years} year{'s' if years != 1 else ''}"
    month_part = f"{months} month{'s' if months != 1 else ''}"
    if years == 0:
        return month_part
    if months == 0:
        return year_part
    return f"{year_part} {month_part}"


def _duration_of(entry: object) -> str:
    if isinstance(entry, Mapping):
        value = entry.get("duration")
    else:
        value = getattr(entry, "duration", None)
    return value if isinstance(value, str) else ""


class ExperienceCalculator:
    """Aggregates per-entry durations into a human-readable total."""

    def __init__(
        self,
        clock: Callable[[], date] = date.today,
        matchers: tuple[DurationMatcher, ...] = MATCHERS,
    ) -> None:
        self._clock = clock
        self._matchers = matchers

    def parse(self, duration: str, today: date | None = None) -> ExperiencePeriod:
        """Parse a single duration string.

        The first matcher that recognizes the string decides the outcome; a
        negative span is discarded rather than clamped.
        """
        today = today or self._clock()
        text = normalize_duration(duration)
        for matcher in self._matchers:
            months = matcher(text, today)
            if months is None:
                continue
            if months < 0:
                Log.debug(f"Discarding negative span for '{duration}' ({months} months)")
                return ExperiencePeriod(raw_duration=duration)
            Log.debug(f"Parsed '{duration}' as {months} months via {matcher.__name__}")
            return ExperiencePeriod(raw_duration=duration, months=months)
        Log.debug(f"Could not parse duration '{duration}'")
        return ExperiencePeriod(raw_duration=duration)

    def periods(self, entries: Iterable[object]) -> list[ExperiencePeriod]:
        """One period per entry that carries a non-empty duration string."""
        today = self._clock()
        return [
            self.parse(duration, today)
            for duration in (_duration_of(e) for e in entries)
            if duration.strip()
        ]

    def calculate(self, entries: Iterable[object]) -> str:
        entries = list(entries)
        if not entries:
            return NO_ENTRIES

        periods = self.periods(entries)
        valid = [p.months for p in periods if p.months is not None]
        if valid:
            total = sum(valid)
            Log.debug(f"Total experience: {total} months from {len(valid)} entries")
            return format_months(total)

        if periods:
            estimated = len(entries) * ESTIMATED_MONTHS_PER_ENTRY
            Log.info(
                f"No parsable durations in {len(entries)} entries, "
                f"estimating {estimated} months"
            )
            return format_months(estimated)

        return UNKNOWN
