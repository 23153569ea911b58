from dataclasses import dataclass


@dataclass(frozen=True)
class ExperiencePeriod:
    """Parsed duration of one work-history entry.

    ``months`` is ``None`` when no matcher recognized the duration or the
    recognized range ran backwards.
    """

    raw_duration: str
    months: int | None = None
