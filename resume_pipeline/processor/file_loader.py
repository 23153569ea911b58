import uuid
from datetime import datetime, timezone
from pathlib import Path

from resume_pipeline.processor.exceptions import FileReadError
from resume_pipeline.processor.models import RawDocument


class FileLoader:
    """Reads a résumé file from disk into a RawDocument."""

    def load(self, path: Path) -> RawDocument:
        """Read document bytes and metadata.

        Raises:
            FileReadError: if the file does not exist or cannot be read.
        """
        if not path.is_file():
            raise FileReadError(f"File not found: {path}")
        try:
            data = path.read_bytes()
            modified = path.stat().st_mtime
        except OSError as exc:
            raise FileReadError(f"Cannot read {path}: {exc}") from exc
        return RawDocument(
            id=str(uuid.uuid4()),
            original_name=path.name,
            data=data,
            extension=path.suffix.lower().lstrip("."),
            uploaded_at=datetime.fromtimestamp(modified, tz=timezone.utc),
        )
