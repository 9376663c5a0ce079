"""Groq provider implementation."""

from typing import Any, AsyncGenerator

import httpx
from openai import AsyncOpenAI

from aquaqual.ai.base import (
    AIProvider,
    ChatMessage,
    ChatStreamChunk,
    ContentGenerationResult,
)
from aquaqual.ai.chat.constants import (
    FREQUENCY_PENALTY,
    MAX_TOKENS,
    TEMPERATURE,
    TOP_P,
)
from aquaqual.ai.groq.config import GroqSettings, get_groq_settings
from aquaqual.ai.groq.exceptions import (
    GroqAuthenticationError,
    GroqCompletionError,
)
from aquaqual.utils.logger import logger


class GroqProvider(AIProvider):
    """Groq provider implementation.

    Talks to Groq's OpenAI-compatible chat-completions endpoint through the
    OpenAI SDK. The SDK client is created on first use and reused afterwards.
    """

    def __init__(self, settings: GroqSettings | None = None):
        """Initialize Groq provider.

        Args:
            settings: Groq settings; defaults to the cached environment settings
        """
        self.settings = settings or get_groq_settings()
        self._client: AsyncOpenAI | None = None

    def _get_client(self) -> AsyncOpenAI:
        """Get or create the OpenAI-compatible client."""
        if self._client is None:
            if not self.settings.api_key:
                raise GroqAuthenticationError("Groq API key not set")
            try:
                timeout = httpx.Timeout(
                    timeout=self.settings.request_timeout,
                    connect=10.0,
                )
                self._client = AsyncOpenAI(
                    api_key=self.settings.api_key,
                    base_url=self.settings.base_url,
                    timeout=timeout,
                    max_retries=0,
                )
                logger.info(
                    "[GROQ] Client initialized",
                    base_url=self.settings.base_url,
                    timeout_seconds=self.settings.request_timeout,
                )
            except Exception as e:
                logger.error("[GROQ] Failed to initialize client", error=str(e))
                raise GroqAuthenticationError(
                    f"Failed to authenticate with Groq: {e}", e
                )
        return self._client

    def _build_params(
        self, messages: list[ChatMessage], **kwargs
    ) -> dict[str, Any]:
        """Build chat-completion parameters.

        Args:
            messages: Conversation to complete
            **kwargs: Overrides for model and generation parameters

        Returns:
            Keyword arguments for ``chat.completions.create``
        """
        return {
            "model": kwargs.get("model", self.settings.model_name),
            "messages": [
                {"role": msg.role, "content": msg.content} for msg in messages
            ],
            "temperature": kwargs.get("temperature", TEMPERATURE),
            "max_tokens": kwargs.get("max_tokens", MAX_TOKENS),
            "top_p": kwargs.get("top_p", TOP_P),
            "frequency_penalty": kwargs.get("frequency_penalty", FREQUENCY_PENALTY),
        }

    async def generate_chat(
        self,
        messages: list[ChatMessage],
        **kwargs,
    ) -> ContentGenerationResult:
        """Generate a complete chat response.

        Args:
            messages: Conversation to complete, system prompt included
            **kwargs: Overrides for model and generation parameters

        Returns:
            ContentGenerationResult: Completion text (empty if the model
            returned no content), token usage and finish reason

        Raises:
            GroqAuthenticationError: If the client cannot be created
            GroqCompletionError: If the API call fails
        """
        client = self._get_client()
        params = self._build_params(messages, **kwargs)

        logger.info(
            "[GROQ] Creating completion",
            model=params["model"],
            message_count=len(messages),
        )

        try:
            response = await client.chat.completions.create(**params)
        except Exception as e:
            logger.error("[GROQ] Completion failed", error=str(e))
            raise GroqCompletionError(str(e), e) from e

        choice = response.choices[0] if response.choices else None
        text = (choice.message.content if choice else None) or ""
        usage = response.usage.model_dump() if response.usage else None

        logger.info(
            "[GROQ] Completion received",
            characters=len(text),
            finish_reason=choice.finish_reason if choice else None,
        )

        return ContentGenerationResult(
            text=text,
            usage=usage,
            finish_reason=choice.finish_reason if choice else None,
        )

    async def stream_chat(
        self,
        messages: list[ChatMessage],
        **kwargs,
    ) -> AsyncGenerator[ChatStreamChunk, None]:
        """Stream a chat response.

        Errors are raised to the caller rather than yielded, so a failure
        before the first chunk can still be reported with an error status.

        Args:
            messages: Conversation to complete, system prompt included
            **kwargs: Overrides for model and generation parameters

        Yields:
            ChatStreamChunk: Content deltas, the last one carrying the finish reason

        Raises:
            GroqAuthenticationError: If the client cannot be created
            GroqCompletionError: If the API call or the stream fails
        """
        client = self._get_client()
        params = self._build_params(messages, **kwargs)

        logger.info(
            "[STREAM] Creating stream",
            model=params["model"],
            message_count=len(messages),
        )

        try:
            stream = await client.chat.completions.create(**params, stream=True)
            async for event in stream:
                if not event.choices:
                    continue
                choice = event.choices[0]
                content = choice.delta.content or ""
                if content or choice.finish_reason:
                    yield ChatStreamChunk(
                        content=content, finish_reason=choice.finish_reason
                    )
        except Exception as e:
            logger.error("[STREAM] Streaming chat failed", error=str(e))
            raise GroqCompletionError(str(e), e) from e

        logger.info("[STREAM] Chat stream completed")
