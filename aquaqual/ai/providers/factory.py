"""Factory for creating AI provider instances."""

from enum import Enum

from aquaqual.ai.base import AIProvider
from aquaqual.utils.logger import logger


class AIProviderType(str, Enum):
    """Available AI provider types."""

    GROQ = "groq"


def create_ai_provider(
    provider_type: AIProviderType | str = AIProviderType.GROQ,
) -> AIProvider:
    """Create an AI provider instance.

    Args:
        provider_type: Type of provider to create

    Returns:
        AIProvider: Instance of the specified provider

    Raises:
        ValueError: If provider type is not supported
    """
    if isinstance(provider_type, str):
        provider_type = AIProviderType(provider_type.lower())

    logger.info(f"Creating AI provider: {provider_type.value}")

    if provider_type == AIProviderType.GROQ:
        from aquaqual.ai.providers.groq import GroqProvider

        return GroqProvider()
    else:
        raise ValueError(f"Unsupported AI provider: {provider_type}")


# Process-wide provider, created lazily from the environment
_ai_provider: AIProvider | None = None


def get_ai_provider() -> AIProvider:
    """Get the shared AI provider instance.

    Returns:
        AIProvider: Provider instance, created on first call
    """
    global _ai_provider
    if _ai_provider is None:
        _ai_provider = create_ai_provider()
    return _ai_provider


def set_ai_provider(provider: AIProvider | None) -> None:
    """Set the global AI provider instance.

    Useful for testing or manually overriding the provider.

    Args:
        provider: The provider instance to set, or None to reset
    """
    global _ai_provider
    _ai_provider = provider
