from pathlib import Path

from resume_pipeline.extraction.exceptions import CompletionError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def _read(path: Path, what: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CompletionError(f"Failed to load {what}: {exc}") from exc


def load_prompt_template(path: Path | None = None) -> str:
    """Load the résumé prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled resume_prompt.txt.

    Returns:
        The raw template string with ``{resume_text}`` and ``{json_schema}``
        placeholders.

    Raises:
        CompletionError: if the file cannot be read.
    """
    return _read(path or _DEFAULT_PROMPT_DIR / "resume_prompt.txt", "prompt template")


def load_system_prompt(path: Path | None = None) -> str:
    return _read(path or _DEFAULT_PROMPT_DIR / "system_prompt.txt", "system prompt").strip()


def load_json_schema(path: Path | None = None) -> str:
    """Load the JSON schema of the résumé draft.

    Raises:
        CompletionError: if the file cannot be read.
    """
    return _read(path or _DEFAULT_PROMPT_DIR / "resume_schema.json", "JSON schema")
