"""Delivery strategies for chat completions.

Both strategies send the same conversation with the same parameters. The
buffered strategy waits for the full completion and returns a JSON envelope;
the streaming strategy relays tokens as they arrive and closes the body with
a sentinel line carrying the structured result.
"""

from abc import ABC, abstractmethod
from typing import AsyncGenerator

from fastapi import Response
from fastapi.responses import JSONResponse, StreamingResponse

from aquaqual.ai.base import AIProvider, ChatMessage, ChatStreamChunk
from aquaqual.ai.chat.exceptions import EmptyCompletionError, UpstreamError
from aquaqual.ai.chat.schemas import ChatResponse, ParsedChatResponse
from aquaqual.ai.chat.sentinel import format_sentinel
from aquaqual.ai.groq.exceptions import GroqError
from aquaqual.config import ResponseMode
from aquaqual.neighborhoods.schemas import LocationHint
from aquaqual.utils.logger import logger


class ResponseStrategy(ABC):
    """Turns a prepared conversation into an HTTP response."""

    @abstractmethod
    async def respond(
        self,
        provider: AIProvider,
        messages: list[ChatMessage],
        location: LocationHint | None,
    ) -> Response:
        """Run the completion and build the response.

        Args:
            provider: Chat-completion provider
            messages: System prompt followed by the user message
            location: Map location of the matched neighborhood, if any

        Raises:
            UpstreamError: If the completion call fails before any output
            EmptyCompletionError: If the model returns no content
        """
        pass


class BufferedResponseStrategy(ResponseStrategy):
    """Waits for the whole completion and returns ``{"parsed": {...}}``."""

    async def respond(
        self,
        provider: AIProvider,
        messages: list[ChatMessage],
        location: LocationHint | None,
    ) -> Response:
        try:
            result = await provider.generate_chat(messages)
        except GroqError as e:
            raise UpstreamError(details=e.message) from e

        if not result.text:
            logger.error(
                "[CHAT] No content in model response",
                finish_reason=result.finish_reason,
            )
            raise EmptyCompletionError()

        logger.info("[AGENT_OUTPUT]", output=result.text)
        if location:
            logger.info("[CHAT] Location matched", lat=location.lat, lon=location.lon)

        body = ChatResponse(
            parsed=ParsedChatResponse(response=result.text, location=location)
        )
        return JSONResponse(content=body.model_dump(mode="json"))


class StreamingResponseStrategy(ResponseStrategy):
    """Relays model tokens as a plain-text body, chunk by chunk."""

    async def _first_content(
        self, stream: AsyncGenerator[ChatStreamChunk, None]
    ) -> str:
        # Read up to the first non-empty delta so failures still map to a status
        try:
            async for chunk in stream:
                if chunk.content:
                    return chunk.content
        except GroqError as e:
            raise UpstreamError(details=e.message) from e

        logger.error("[STREAM] Stream ended without content")
        raise EmptyCompletionError()

    async def respond(
        self,
        provider: AIProvider,
        messages: list[ChatMessage],
        location: LocationHint | None,
    ) -> Response:
        stream = provider.stream_chat(messages)
        try:
            first_content = await self._first_content(stream)
        except BaseException:
            await stream.aclose()
            raise

        async def relay() -> AsyncGenerator[str, None]:
            accumulated_output = first_content
            completed = False
            try:
                yield first_content
                async for chunk in stream:
                    if chunk.content:
                        accumulated_output += chunk.content
                        yield chunk.content
                completed = True
            except GroqError as e:
                # Headers are already sent; end the body without a sentinel
                logger.error("[STREAM] Relay interrupted", error=e.message)
            finally:
                await stream.aclose()

            if completed:
                logger.info("[AGENT_OUTPUT]", output=accumulated_output)
                yield format_sentinel(
                    ParsedChatResponse(response=accumulated_output, location=location)
                )

        return StreamingResponse(
            relay(),
            media_type="text/plain; charset=utf-8",
            headers={
                "Cache-Control": "no-cache",
                "X-Accel-Buffering": "no",  # Disable nginx buffering
            },
        )


def create_response_strategy(mode: ResponseMode | str) -> ResponseStrategy:
    """Create the strategy for the configured response mode.

    Raises:
        ValueError: If the mode is not supported
    """
    mode = ResponseMode(mode)
    if mode == ResponseMode.STREAMING:
        return StreamingResponseStrategy()
    return BufferedResponseStrategy()
