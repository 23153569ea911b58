import httpx
import openai

from resume_pipeline.extraction.client_base import BaseCompletionClient
from resume_pipeline.extraction.exceptions import CompletionError, CompletionNetworkError


class OpenAIClientAdapter(BaseCompletionClient):
    """Completion client built on the OpenAI-compatible chat API.

    Exactly one request per call: SDK retries are disabled.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        use_json_schema: bool = True,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )
        self._use_json_schema = use_json_schema

    def _response_format(self, json_schema: dict[str, object]) -> dict[str, object]:
        if not self._use_json_schema:
            return {"type": "json_object"}
        return {
            "type": "json_schema",
            "json_schema": {
                "name": "resume_draft",
                "strict": True,
                "schema": json_schema,
            },
        }

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
        max_tokens: int,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
                response_format=self._response_format(json_schema),  # type: ignore[arg-type]
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise CompletionNetworkError(f"Completion provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise CompletionNetworkError(f"Completion provider API error: {exc}") from exc

        if not response.choices:
            raise CompletionError("Completion returned no choices")
        content = response.choices[0].message.content
        if not content or not content.strip():
            raise CompletionError("Completion returned empty response")
        return content
