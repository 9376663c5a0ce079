from enum import Enum
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_NEIGHBORHOODS_PATH = Path(__file__).parent / "data" / "neighborhoods.json"


class Environment(str, Enum):
    """Application environments."""

    DEVELOPMENT = "dev"
    STAGING = "staging"
    PRODUCTION = "prod"


class ResponseMode(str, Enum):
    """How chat completions are delivered to the caller."""

    BUFFERED = "buffered"
    STREAMING = "streaming"


class PromptTemplate(str, Enum):
    """Available system prompt templates."""

    SOUTH_FLORIDA_SPECIALIST = "south_florida_specialist"
    RESILIENCE_ADVISOR = "resilience_advisor"


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Current environment (dev, staging, or prod)",
    )
    client_base_url: str = Field(
        default="http://localhost:3000", description="Frontend base URL"
    )

    # Chat pipeline
    response_mode: ResponseMode = Field(
        default=ResponseMode.BUFFERED,
        description="Deliver completions as a JSON envelope or a relayed token stream",
    )
    prompt_template: PromptTemplate = Field(
        default=PromptTemplate.SOUTH_FLORIDA_SPECIALIST,
        description="System prompt template used for every chat request",
    )
    neighborhoods_path: Path = Field(
        default=DEFAULT_NEIGHBORHOODS_PATH,
        description="JSON file holding the curated neighborhood records",
    )


_app_settings: AppSettings | None = None


def get_app_settings() -> AppSettings:
    global _app_settings
    if _app_settings is None:
        _app_settings = AppSettings()
    return _app_settings


def get_client_base_url() -> str:
    """Get the client base URL from settings."""
    settings = get_app_settings()
    return settings.client_base_url
