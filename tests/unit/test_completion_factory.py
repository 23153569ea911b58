"""Tests for CompletionClientFactory."""

from unittest.mock import patch

import pytest

from resume_pipeline.config.settings import Settings
from resume_pipeline.extraction.example_client_adapter import ExampleClientAdapter
from resume_pipeline.extraction.factory import CompletionClientFactory
from resume_pipeline.extraction.models import DraftSource
from resume_pipeline.extraction.structured_extractor import StructuredExtractor


class TestCreate:
    def test_creates_example_adapter(self) -> None:
        client = CompletionClientFactory.create(Settings(completion_provider="example"))
        assert isinstance(client, ExampleClientAdapter)

    def test_uses_openai_settings(self) -> None:
        settings = Settings(
            completion_provider="openai",
            completion_openai_api_key="openai-key",
            completion_openai_timeout_seconds=42,
        )
        with patch("resume_pipeline.extraction.factory.OpenAIClientAdapter") as mock_adapter:
            CompletionClientFactory.create(settings)
        mock_adapter.assert_called_once_with(
            api_key="openai-key",
            timeout_seconds=42,
            base_url=None,
            use_json_schema=True,
        )

    def test_uses_provider_default_base_url_for_openrouter(self) -> None:
        settings = Settings(
            completion_provider="openrouter",
            completion_openrouter_api_key="or-key",
        )
        with patch("resume_pipeline.extraction.factory.OpenAIClientAdapter") as mock_adapter:
            CompletionClientFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == "https://openrouter.ai/api/v1"
        assert mock_adapter.call_args.kwargs["api_key"] == "or-key"

    def test_deepseek_uses_json_object_mode(self) -> None:
        settings = Settings(completion_provider="deepseek", completion_deepseek_api_key="ds")
        with patch("resume_pipeline.extraction.factory.OpenAIClientAdapter") as mock_adapter:
            CompletionClientFactory.create(settings)
        assert mock_adapter.call_args.kwargs["use_json_schema"] is False
        assert mock_adapter.call_args.kwargs["base_url"] == "https://api.deepseek.com/v1"
        assert mock_adapter.call_args.kwargs["timeout_seconds"] == 60

    def test_openai_compatible_uses_configured_url(self) -> None:
        settings = Settings(
            completion_provider="openai_compatible",
            completion_openai_compatible_base_url=" http://llm.local/v1 ",
        )
        with patch("resume_pipeline.extraction.factory.OpenAIClientAdapter") as mock_adapter:
            CompletionClientFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == "http://llm.local/v1"

    def test_openai_compatible_requires_url(self) -> None:
        settings = Settings(completion_provider="openai_compatible")
        with pytest.raises(ValueError, match="base_url is required"):
            CompletionClientFactory.create(settings)

    def test_raises_for_unknown_provider(self) -> None:
        with pytest.raises(ValueError, match="Unknown completion provider"):
            CompletionClientFactory.create(Settings(completion_provider="acme-llm"))


class TestCreateExtractor:
    def test_example_provider_extracts_with_regex(self, resume_text: str) -> None:
        extractor = CompletionClientFactory.create_extractor(
            Settings(completion_provider="example")
        )
        assert isinstance(extractor, StructuredExtractor)
        draft, source = extractor.extract_with_source(resume_text)
        assert source is DraftSource.MERGED
        assert draft.name == "Jane Doe"

    def test_passes_model_and_limits(self) -> None:
        settings = Settings(
            completion_provider="openai",
            completion_openai_model_name="gpt-4",
            completion_temperature=0.3,
            completion_max_input_chars=1000,
        )
        with (
            patch("resume_pipeline.extraction.factory.OpenAIClientAdapter"),
            patch("resume_pipeline.extraction.factory.StructuredExtractor") as mock_extractor,
        ):
            CompletionClientFactory.create_extractor(settings)
        kwargs = mock_extractor.call_args.kwargs
        assert kwargs["model"] == "gpt-4"
        assert kwargs["temperature"] == 0.3
        assert kwargs["max_input_chars"] == 1000
