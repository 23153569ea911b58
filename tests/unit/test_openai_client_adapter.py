from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from resume_pipeline.extraction.exceptions import CompletionError, CompletionNetworkError
from resume_pipeline.extraction.openai_client_adapter import OpenAIClientAdapter


def _make_mock_response(content: str | None) -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    response = MagicMock()
    response.choices = [choice]
    return response


def _call(adapter: OpenAIClientAdapter) -> str:
    return adapter.create_chat_completion(
        model="m",
        temperature=0.1,
        system_prompt="system",
        user_prompt="user",
        json_schema={"type": "object"},
        max_tokens=4000,
    )


@pytest.fixture()
def mock_client() -> Iterator[MagicMock]:
    client = MagicMock()
    with patch(
        "resume_pipeline.extraction.openai_client_adapter.openai.OpenAI",
        return_value=client,
    ) as mock_openai:
        client.factory = mock_openai
        yield client


class TestOpenAIClientAdapter:
    def test_returns_content(self, mock_client: MagicMock) -> None:
        mock_client.chat.completions.create.return_value = _make_mock_response('{"ok": true}')
        adapter = OpenAIClientAdapter(api_key="k", timeout_seconds=30)
        assert _call(adapter) == '{"ok": true}'

    def test_disables_sdk_retries(self, mock_client: MagicMock) -> None:
        OpenAIClientAdapter(api_key="k", timeout_seconds=12, base_url="http://llm/v1")
        mock_client.factory.assert_called_once_with(
            api_key="k", timeout=12, base_url="http://llm/v1", max_retries=0
        )

    def test_sends_strict_json_schema(self, mock_client: MagicMock) -> None:
        mock_client.chat.completions.create.return_value = _make_mock_response("{}")
        _call(OpenAIClientAdapter(api_key="k", timeout_seconds=30))
        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["response_format"]["type"] == "json_schema"
        assert kwargs["response_format"]["json_schema"]["strict"] is True
        assert kwargs["response_format"]["json_schema"]["schema"] == {"type": "object"}
        assert kwargs["max_tokens"] == 4000
        assert kwargs["messages"][0] == {"role": "system", "content": "system"}
        assert kwargs["messages"][1] == {"role": "user", "content": "user"}

    def test_sends_json_object_when_schema_unsupported(self, mock_client: MagicMock) -> None:
        mock_client.chat.completions.create.return_value = _make_mock_response("{}")
        _call(OpenAIClientAdapter(api_key="k", timeout_seconds=30, use_json_schema=False))
        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["response_format"] == {"type": "json_object"}

    def test_raises_error_for_empty_content(self, mock_client: MagicMock) -> None:
        mock_client.chat.completions.create.return_value = _make_mock_response("  ")
        with pytest.raises(CompletionError, match="empty response"):
            _call(OpenAIClientAdapter(api_key="k", timeout_seconds=30))

    def test_raises_error_for_no_choices(self, mock_client: MagicMock) -> None:
        response = MagicMock()
        response.choices = []
        mock_client.chat.completions.create.return_value = response
        with pytest.raises(CompletionError, match="no choices"):
            _call(OpenAIClientAdapter(api_key="k", timeout_seconds=30))

    def test_raises_network_error_on_connection_failure(self, mock_client: MagicMock) -> None:
        mock_client.chat.completions.create.side_effect = openai.APIConnectionError(
            request=MagicMock()
        )
        with pytest.raises(CompletionNetworkError, match="network error"):
            _call(OpenAIClientAdapter(api_key="k", timeout_seconds=30))

    def test_raises_network_error_on_timeout(self, mock_client: MagicMock) -> None:
        mock_client.chat.completions.create.side_effect = httpx.TimeoutException("timeout")
        with pytest.raises(CompletionNetworkError, match="network error"):
            _call(OpenAIClientAdapter(api_key="k", timeout_seconds=30))

    def test_raises_network_error_on_api_error(self, mock_client: MagicMock) -> None:
        mock_client.chat.completions.create.side_effect = openai.APIError(
            message="server error",
            request=MagicMock(),
            body=None,
        )
        with pytest.raises(CompletionNetworkError, match="API error"):
            _call(OpenAIClientAdapter(api_key="k", timeout_seconds=30))
