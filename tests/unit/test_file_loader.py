import os
from datetime import datetime, timezone
from pathlib import Path

import pytest

from resume_pipeline.processor.exceptions import FileReadError
from resume_pipeline.processor.file_loader import FileLoader


class TestLoad:
    def test_reads_bytes_and_metadata(self, tmp_path: Path) -> None:
        path = tmp_path / "jane_doe.PDF"
        path.write_bytes(b"%PDF test content")
        os.utime(path, (1717243200, 1717243200))

        document = FileLoader().load(path)

        assert document.data == b"%PDF test content"
        assert document.original_name == "jane_doe.PDF"
        assert document.extension == "pdf"
        assert document.uploaded_at == datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)

    def test_ids_are_unique(self, tmp_path: Path) -> None:
        path = tmp_path / "cv.docx"
        path.write_bytes(b"PK")
        loader = FileLoader()
        assert loader.load(path).id != loader.load(path).id

    def test_file_without_extension(self, tmp_path: Path) -> None:
        path = tmp_path / "resume"
        path.write_bytes(b"%PDF")
        assert FileLoader().load(path).extension == ""

    def test_empty_file_is_loaded(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.pdf"
        path.write_bytes(b"")
        assert FileLoader().load(path).data == b""


class TestLoadErrors:
    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileReadError, match="File not found"):
            FileLoader().load(tmp_path / "missing.pdf")

    def test_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileReadError, match="File not found"):
            FileLoader().load(tmp_path)
