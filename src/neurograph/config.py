"""Configuration management using Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Upstream chat completion API (OpenAI-compatible)
    openai_api_key: str | None = Field(
        default=None,
        description="Bearer credential for the chat completion API"
    )
    llm_base_url: str = "https://api.openai.com/v1"
    llm_model: str = "gpt-4o"
    llm_timeout: float | None = Field(
        default=None,
        description="HTTP timeout in seconds, None leaves the client default"
    )

    # Answer stage
    answer_temperature: float = 0.7
    answer_max_tokens: int = 800

    # Extraction stage
    extraction_temperature: float = Field(
        default=0.3,
        description="Lower temperature for structured output"
    )
    extraction_max_tokens: int = 1500

    # Layout
    layout_seed: int | None = Field(
        default=None,
        description="Seed for the radial layout RNG, None for a random layout"
    )

    # API Configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    log_level: str = "INFO"

    @property
    def api_key_configured(self) -> bool:
        return bool(self.openai_api_key and self.openai_api_key.strip())


# Global settings instance
settings = Settings()
