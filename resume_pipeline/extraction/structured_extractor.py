"""Résumé text to structured fields with one completion call and a regex safety net."""

import json
from pathlib import Path
from typing import Any

from resume_pipeline.extraction.client_base import BaseCompletionClient
from resume_pipeline.extraction.exceptions import CompletionError
from resume_pipeline.extraction.merge import merge
from resume_pipeline.extraction.models import (
    DraftError,
    DraftOk,
    DraftResult,
    DraftSource,
    StructuredResumeDraft,
)
from resume_pipeline.extraction.prompt_loader import (
    load_json_schema,
    load_prompt_template,
    load_system_prompt,
)
from resume_pipeline.extraction.regex_extractor import RegexExtractor
from resume_pipeline.extraction.validator import validate_and_coerce
from resume_pipeline.logging.logger import Log

DEFAULT_MAX_INPUT_CHARS = 75000
DEFAULT_MAX_TOKENS = 4000


class StructuredExtractor:
    """Extracts a StructuredResumeDraft from résumé text.

    The completion client is asked once. Whatever it returns is validated; the
    deterministic regex extractor always runs as well and fills empty fields,
    or supplies the whole draft when the completion failed.
    """

    def __init__(
        self,
        *,
        client: BaseCompletionClient | None,
        model: str,
        temperature: float = 0.1,
        max_input_chars: int = DEFAULT_MAX_INPUT_CHARS,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        regex_extractor: RegexExtractor | None = None,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._max_input_chars = max_input_chars
        self._max_tokens = max_tokens
        self._regex = regex_extractor or RegexExtractor()
        self._system_prompt = load_system_prompt()
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._json_schema = load_json_schema(json_schema_path)
        self._json_schema_dict = json.loads(self._json_schema)

    def extract(self, text: str) -> StructuredResumeDraft:
        draft, _ = self.extract_with_source(text)
        return draft

    def extract_with_source(self, text: str) -> tuple[StructuredResumeDraft, DraftSource]:
        """Never raises. Returns the sanitized draft and where its fields came from."""
        llm_result = self._complete(text)
        regex_draft = self._regex.extract(text)

        if isinstance(llm_result, DraftOk):
            draft, source = merge(llm_result.draft.sanitized(), regex_draft)
        else:
            Log.warning(f"Completion unusable, using regex extraction: {llm_result.reason}")
            draft, source = regex_draft, DraftSource.REGEX

        Log.info(
            f"Structured extraction complete: source={source.value}, "
            f"{len(draft.skills)} skills, {len(draft.experience)} experience entries"
        )
        return draft.sanitized(), source

    def _complete(self, text: str) -> DraftResult:
        if self._client is None:
            return DraftError(reason="no completion client configured")
        prompt = self._build_prompt(text)
        Log.debug(f"Extraction prompt:\n{prompt}")
        try:
            raw_response = self._client.create_chat_completion(
                model=self._model,
                temperature=self._temperature,
                system_prompt=self._system_prompt,
                user_prompt=prompt,
                json_schema=self._json_schema_dict,
                max_tokens=self._max_tokens,
            )
        except CompletionError as exc:
            return DraftError(reason=str(exc))
        except Exception as exc:
            Log.error(f"Completion client failed unexpectedly: {exc}")
            return DraftError(reason=f"unexpected completion failure: {exc}")
        Log.debug(f"Completion raw response:\n{raw_response}")

        try:
            parsed = self._parse_json(raw_response)
        except CompletionError as exc:
            return DraftError(reason=str(exc))
        return validate_and_coerce(parsed)

    def _build_prompt(self, text: str) -> str:
        if len(text) > self._max_input_chars:
            Log.info(f"Truncating résumé text from {len(text)} to {self._max_input_chars} chars")
            text = text[: self._max_input_chars]
        return self._prompt_template.format(resume_text=text, json_schema=self._json_schema)

    @staticmethod
    def _parse_json(raw: str) -> Any:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        start, end = cleaned.find("{"), cleaned.rfind("}")
        if start == -1 or end < start:
            raise CompletionError("No JSON object in completion response")
        try:
            return json.loads(cleaned[start : end + 1])
        except json.JSONDecodeError as exc:
            raise CompletionError(f"Invalid JSON response: {exc}") from exc
