from resume_pipeline.ocr.rasterizer import render_pages

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class TestRenderPages:
    def test_one_png_per_page(self, multi_page_pdf_bytes: bytes) -> None:
        images = render_pages(multi_page_pdf_bytes)
        assert len(images) == 2
        assert all(image.startswith(PNG_SIGNATURE) for image in images)

    def test_respects_max_pages(self, multi_page_pdf_bytes: bytes) -> None:
        assert len(render_pages(multi_page_pdf_bytes, max_pages=1)) == 1

    def test_zoom_increases_size(self, sample_pdf_bytes: bytes) -> None:
        small = render_pages(sample_pdf_bytes, zoom=1.0)[0]
        large = render_pages(sample_pdf_bytes, zoom=2.0)[0]
        assert len(large) > len(small)

    def test_invalid_pdf_gives_empty_list(self) -> None:
        assert render_pages(b"not a pdf") == []
