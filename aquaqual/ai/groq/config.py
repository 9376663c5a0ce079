"""Groq API configuration."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from aquaqual.ai.chat.constants import MODEL_NAME


class GroqSettings(BaseSettings):
    """Settings for the Groq chat-completion API.

    Groq exposes an OpenAI-compatible endpoint, so the OpenAI SDK client is
    pointed at ``base_url`` and authenticated with the Groq key.

    Attributes:
        api_key: Groq API key (read from ``GROQ_API_KEY``). Optional here so a
            missing key is reported per request instead of at startup.
        base_url: OpenAI-compatible Groq endpoint
        model_name: Model identifier sent with every completion
        request_timeout: HTTP request timeout in seconds
    """

    model_config = SettingsConfigDict(
        env_prefix="GROQ_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        description="Groq API key",
    )
    base_url: str = Field(
        default="https://api.groq.com/openai/v1",
        description="OpenAI-compatible Groq API base URL",
    )
    model_name: str = Field(
        default=MODEL_NAME,
        description="Model identifier used for chat completions",
    )
    request_timeout: int = Field(
        default=120,
        gt=0,
        description="HTTP request timeout in seconds",
    )


@lru_cache
def get_groq_settings() -> GroqSettings:
    """Get cached Groq settings instance.

    Returns:
        GroqSettings: Cached settings instance
    """
    return GroqSettings()
