from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"

    renderer_engine: str = "pymupdf"
    renderer_timeout_ms: int = 30000
    scratch_dir: str = ""

    ocr_engine: str = "tesseract"
    ocr_language: str = "eng"
    ocr_zoom: float = 2.0
    ocr_max_pages: int = 10
    ocr_max_workers: int = 4
    tesseract_cmd: str = ""

    completion_provider: str = "deepseek"
    completion_temperature: float = 0.1
    completion_max_input_chars: int = 75000

    completion_openai_api_key: str = ""
    completion_openai_model_name: str = "gpt-4o-mini"
    completion_openai_timeout_seconds: int = 30

    completion_openai_compatible_api_key: str = ""
    completion_openai_compatible_base_url: str = ""
    completion_openai_compatible_model_name: str = ""
    completion_openai_compatible_timeout_seconds: int = 30

    completion_deepseek_api_key: str = ""
    completion_deepseek_model_name: str = "deepseek-chat"
    completion_deepseek_timeout_seconds: int = 60

    completion_openrouter_api_key: str = ""
    completion_openrouter_model_name: str = ""
    completion_openrouter_timeout_seconds: int = 30

    completion_groq_api_key: str = ""
    completion_groq_model_name: str = ""
    completion_groq_timeout_seconds: int = 30

    completion_together_api_key: str = ""
    completion_together_model_name: str = ""
    completion_together_timeout_seconds: int = 30

    completion_ollama_api_key: str = "ollama"
    completion_ollama_model_name: str = ""
    completion_ollama_timeout_seconds: int = 120
