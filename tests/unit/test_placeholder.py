import pymupdf

from resume_pipeline.conversion import placeholder


class TestPrintableRuns:
    def test_extracts_runs_of_five_or_more(self) -> None:
        data = b"\x00\x01Hello World\x00\x02abc\x00Another run here"
        assert placeholder.printable_runs(data) == ["Hello World", "Another run here"]

    def test_caps_number_of_runs(self) -> None:
        data = b"\x00".join(b"run number %d" % i for i in range(60))
        assert len(placeholder.printable_runs(data)) == placeholder.MAX_RUNS


class TestPlaceholderHtml:
    def test_names_file_and_explains(self) -> None:
        html = placeholder.to_html(b"\x00Readable words\x00", "cv <old>.doc")
        assert "cv &lt;old&gt;.doc" in html
        assert "could not be fully converted" in html
        assert "<p>Readable words</p>" in html


class TestPlainPdf:
    def test_builds_readable_pdf(self) -> None:
        pdf = placeholder.plain_pdf(b"\x00Readable words\x00", "cv.doc")
        assert pdf.startswith(b"%PDF")
        with pymupdf.open(stream=pdf, filetype="pdf") as doc:
            text = "".join(page.get_text() for page in doc)
        assert "cv.doc" in text
        assert "Readable words" in text
