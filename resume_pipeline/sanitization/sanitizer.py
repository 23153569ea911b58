"""Cleans strings before they leave the pipeline for storage.

Extracted text and LLM answers routinely carry NUL bytes, stray control
characters from PDF content streams, and lone surrogates produced by broken
encodings. PostgreSQL rejects all of these in text columns.
"""

import re

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
_SURROGATE_RE = re.compile(r"[\ud800-\udfff]")


def clean(value: str | None) -> str:
    """Strip control characters and lone surrogates, then trim.

    Tab, LF and CR are kept. ``clean(clean(s)) == clean(s)`` for any ``s``.
    """
    if not value:
        return ""
    text = _CONTROL_RE.sub("", value)
    text = _SURROGATE_RE.sub(" ", text)
    return text.strip()


def clean_list(values: list[str] | None) -> list[str]:
    """Clean every item and drop the ones that end up empty."""
    if not values:
        return []
    cleaned = (clean(v) for v in values if isinstance(v, str))
    return [v for v in cleaned if v]
