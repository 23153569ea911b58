import io
from collections.abc import Callable
from datetime import date, datetime, timezone

import docx
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from resume_pipeline.processor.models import RawDocument

RESUME_LINES = [
    "Jane Doe",
    "Email: jane.doe@example.com",
    "Phone: (555) 123-4567",
    "Location: Austin, TX 78701",
    "",
    "Summary",
    "Senior Software Engineer with 8 years of experience building web platforms.",
    "",
    "Skills",
    "Python, Django, PostgreSQL, Docker, AWS",
    "",
    "Experience",
    "Acme Corp, Senior Software Engineer, Jan 2019 - Present",
    "Built the billing platform.",
    "Globex, Software Engineer, 2015 - 2018",
    "",
    "Education",
    "Bachelor of Science in Computer Science, University of Texas, 2014",
    "",
    "Certifications: AWS Certified Developer, Certified ScrumMaster",
    "Languages: English, Spanish",
]

RESUME_TEXT = "\n".join(RESUME_LINES) + "\n"

TODAY = date(2024, 6, 15)


@pytest.fixture()
def today() -> date:
    return TODAY


@pytest.fixture()
def resume_text() -> str:
    return RESUME_TEXT


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def resume_pdf_bytes() -> bytes:
    """A one-page résumé PDF with enough text to skip OCR."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    y = 740
    for line in RESUME_LINES:
        c.drawString(72, y, line)
        y -= 16
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    """A Word résumé with a title, headings, a bullet list and a table."""
    document = docx.Document()
    document.add_heading("Jane Doe", level=0)
    document.add_paragraph("Senior Software Engineer")
    document.add_heading("Skills", level=1)
    document.add_paragraph("Python", style="List Bullet")
    document.add_paragraph("Docker", style="List Bullet")
    document.add_heading("Experience", level=1)
    document.add_paragraph("Acme Corp, Developer, 2018 - 2020")
    document.add_paragraph("R&D <platform> team")
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Languages"
    table.rows[0].cells[1].text = "English"
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def make_document() -> Callable[..., RawDocument]:
    def _make(
        data: bytes | None = b"%PDF-fake",
        original_name: str = "jane_doe.pdf",
        extension: str = "pdf",
    ) -> RawDocument:
        return RawDocument(
            id="doc-1",
            original_name=original_name,
            data=data,
            extension=extension,
            uploaded_at=datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc),
        )

    return _make
