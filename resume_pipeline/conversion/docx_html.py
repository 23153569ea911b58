"""Word (DOCX) to structured HTML with python-docx."""

import io
from html import escape

import docx
from docx.table import Table
from docx.text.paragraph import Paragraph

from resume_pipeline.conversion import html_shell
from resume_pipeline.conversion.exceptions import ConversionError

_HEADING_LEVELS = {"title": 1, "heading 1": 1, "heading 2": 2, "heading 3": 3}


def _style_name(paragraph: Paragraph) -> str:
    style = paragraph.style
    return (style.name or "").lower() if style is not None else ""


def _is_list_item(paragraph: Paragraph, style: str) -> bool:
    if style.startswith("list"):
        return True
    properties = paragraph._p.pPr
    return properties is not None and properties.numPr is not None


def _paragraph_html(paragraph: Paragraph) -> tuple[str, bool]:
    """HTML for one paragraph and whether it is a list item."""
    text = escape(paragraph.text.strip())
    style = _style_name(paragraph)
    if _is_list_item(paragraph, style):
        return f"<li>{text}</li>", True
    level = _HEADING_LEVELS.get(style)
    if level is None and style.startswith("heading"):
        level = 3
    if level is not None:
        return f"<h{level}>{text}</h{level}>", False
    return f"<p>{text}</p>", False


def _table_html(table: Table) -> str:
    rows = []
    for row in table.rows:
        cells = "".join(f"<td>{escape(cell.text.strip())}</td>" for cell in row.cells)
        rows.append(f"<tr>{cells}</tr>")
    return f"<table>{''.join(rows)}</table>"


def to_html(data: bytes, title: str) -> str:
    """Render the body of a DOCX file as a styled HTML document.

    Raises:
        ConversionError: if the bytes are not a readable DOCX package.
    """
    try:
        document = docx.Document(io.BytesIO(data))
    except Exception as exc:
        raise ConversionError(f"Cannot read Word document: {exc}") from exc

    parts: list[str] = []
    in_list = False
    for block in document.iter_inner_content():
        if isinstance(block, Paragraph):
            if not block.text.strip():
                continue
            fragment, is_item = _paragraph_html(block)
        else:
            fragment, is_item = _table_html(block), False
        if is_item and not in_list:
            parts.append("<ul>")
        elif not is_item and in_list:
            parts.append("</ul>")
        in_list = is_item
        parts.append(fragment)
    if in_list:
        parts.append("</ul>")

    if not parts:
        raise ConversionError("Word document has no text content")
    return html_shell.wrap(title, "".join(parts))
