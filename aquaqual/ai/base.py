"""Base classes for AI provider abstraction."""

from abc import ABC, abstractmethod
from typing import Any, AsyncGenerator, Literal

from pydantic import BaseModel


class ChatMessage(BaseModel):
    """Chat message model.

    Represents a single turn in a conversation. The chat pipeline sends the
    system prompt as a message with the ``system`` role.
    """

    role: Literal["user", "assistant", "system"]
    content: str


class ContentGenerationResult(BaseModel):
    """Result from a buffered completion."""

    text: str
    usage: dict[str, Any] | None = None
    finish_reason: str | None = None


class ChatStreamChunk(BaseModel):
    """Chunk from a streaming completion."""

    content: str = ""
    finish_reason: str | None = None


class AIProvider(ABC):
    """Abstract base class for chat-completion providers."""

    @abstractmethod
    async def generate_chat(
        self,
        messages: list[ChatMessage],
        **kwargs,
    ) -> ContentGenerationResult:
        """Generate a complete chat response.

        Args:
            messages: Conversation to complete, system prompt included
            **kwargs: Provider-specific options (temperature, max_tokens, etc.)

        Returns:
            ContentGenerationResult: Generated content with metadata
        """
        pass

    @abstractmethod
    def stream_chat(
        self,
        messages: list[ChatMessage],
        **kwargs,
    ) -> AsyncGenerator[ChatStreamChunk, None]:
        """Stream a chat response chunk by chunk.

        Args:
            messages: Conversation to complete, system prompt included
            **kwargs: Provider-specific options (temperature, max_tokens, etc.)

        Yields:
            ChatStreamChunk: Content deltas followed by a finish reason
        """
        pass
