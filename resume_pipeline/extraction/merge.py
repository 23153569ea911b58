from dataclasses import fields

from resume_pipeline.extraction.models import DraftSource, StructuredResumeDraft


def merge(
    primary: StructuredResumeDraft, fallback: StructuredResumeDraft
) -> tuple[StructuredResumeDraft, DraftSource]:
    """Field by field, keep ``primary`` and take ``fallback`` only where primary is empty.

    Returns the merged draft and ``MERGED`` when any field came from the
    fallback, ``LLM`` otherwise.
    """
    values = {}
    filled = False
    for f in fields(StructuredResumeDraft):
        mine = getattr(primary, f.name)
        theirs = getattr(fallback, f.name)
        if not mine and theirs:
            values[f.name] = theirs
            filled = True
        else:
            values[f.name] = mine
    source = DraftSource.MERGED if filled else DraftSource.LLM
    return StructuredResumeDraft(**values), source
