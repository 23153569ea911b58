"""Last-resort output for documents that cannot be converted."""

import re
from html import escape

import pymupdf

from resume_pipeline.conversion import html_shell

_RUN_RE = re.compile(r"[A-Za-z0-9\s.,;:'\"!?()-]{5,100}")
MAX_RUNS = 50


def printable_runs(data: bytes) -> list[str]:
    """Printable character runs from arbitrary bytes, first ``MAX_RUNS`` only."""
    text = data.decode("latin-1")
    runs = []
    for match in _RUN_RE.finditer(text):
        run = match.group(0).strip()
        if run:
            runs.append(run)
        if len(runs) >= MAX_RUNS:
            break
    return runs


def notice(original_name: str) -> str:
    return (
        f"The document '{original_name}' could not be fully converted. "
        "The text below was recovered from the original file."
    )


def to_html(data: bytes, original_name: str) -> str:
    runs = printable_runs(data)
    body = [
        f"<h1>{escape(original_name)}</h1>",
        f"<p class=\"notice\">{escape(notice(original_name))}</p>",
    ]
    body.extend(f"<p>{escape(run)}</p>" for run in runs)
    return html_shell.wrap(original_name, "".join(body))


def plain_pdf(data: bytes, original_name: str) -> bytes:
    """A single-page PDF with the notice and recovered runs, drawn directly."""
    text = "\n".join([original_name, "", notice(original_name), "", *printable_runs(data)])
    with pymupdf.open() as doc:  # type: ignore[no-untyped-call]
        page = doc.new_page(width=595, height=842)
        page.insert_textbox(pymupdf.Rect(56, 56, 539, 786), text, fontsize=10)
        return doc.tobytes()
