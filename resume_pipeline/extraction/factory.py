from typing import Any, ClassVar

from resume_pipeline.config.settings import Settings
from resume_pipeline.extraction.client_base import BaseCompletionClient
from resume_pipeline.extraction.example_client_adapter import ExampleClientAdapter
from resume_pipeline.extraction.openai_client_adapter import OpenAIClientAdapter
from resume_pipeline.extraction.structured_extractor import StructuredExtractor


class CompletionClientFactory:
    """Creates the configured completion client and structured extractor."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }
    # Providers that accept only {"type": "json_object"} as response format.
    JSON_OBJECT_PROVIDERS: ClassVar[frozenset[str]] = frozenset({"deepseek"})

    @classmethod
    def supported(cls) -> list[str]:
        return ["example", "openai", "openai_compatible", *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS)]

    @classmethod
    def create(cls, settings: Settings) -> BaseCompletionClient:
        provider = settings.completion_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        return OpenAIClientAdapter(
            api_key=cls._setting(provider, "api_key", settings) or "",
            timeout_seconds=cls._setting(provider, "timeout_seconds", settings) or 30,
            base_url=cls._resolve_base_url(provider, settings),
            use_json_schema=provider not in cls.JSON_OBJECT_PROVIDERS,
        )

    @classmethod
    def create_extractor(cls, settings: Settings) -> StructuredExtractor:
        """Create a configured structured extractor from application settings."""
        client = cls.create(settings)
        provider = settings.completion_provider.lower()
        model = "example" if provider == "example" else cls._setting(provider, "model_name", settings)
        return StructuredExtractor(
            client=client,
            model=model or "",
            temperature=settings.completion_temperature,
            max_input_chars=settings.completion_max_input_chars,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = (settings.completion_openai_compatible_base_url or "").strip()
            if not url:
                raise ValueError(
                    "completion_openai_compatible_base_url is required for "
                    "completion_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        raise ValueError(
            f"Unknown completion provider '{provider}'. Choose from: {cls.supported()}"
        )

    @staticmethod
    def _setting(provider: str, name: str, settings: Settings) -> Any:
        return getattr(settings, f"completion_{provider}_{name}", None)
