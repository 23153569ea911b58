from abc import ABC, abstractmethod


class BaseCompletionClient(ABC):
    """Contract for provider-specific chat completion clients."""

    @abstractmethod
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
        """Return provider response as plain text.

        Raises:
            CompletionNetworkError: on network, timeout or API failures.
            CompletionError: when the provider answers with no content.
        """
