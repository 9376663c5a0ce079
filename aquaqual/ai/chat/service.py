"""
Climate Chat Service for South Florida neighborhood questions.

Validates the request, matches the message against the curated neighborhood
dataset, builds the system prompt and hands the conversation to the
configured response strategy.
"""

from typing import Any

from fastapi import Response
from pydantic import BaseModel, ValidationError

from aquaqual.ai.base import AIProvider, ChatMessage
from aquaqual.ai.chat.exceptions import (
    DataUnavailableError,
    InvalidRequestBodyError,
    MissingCredentialError,
    MissingMessageError,
)
from aquaqual.ai.chat.prompts import build_system_prompt
from aquaqual.ai.chat.schemas import ChatRequest
from aquaqual.ai.chat.strategies import ResponseStrategy, create_response_strategy
from aquaqual.ai.groq.config import GroqSettings, get_groq_settings
from aquaqual.ai.providers.factory import get_ai_provider
from aquaqual.config import AppSettings, get_app_settings
from aquaqual.neighborhoods.matcher import find_best_match
from aquaqual.neighborhoods.repository import (
    NeighborhoodDataError,
    NeighborhoodRepository,
)
from aquaqual.neighborhoods.schemas import MatchResult
from aquaqual.utils.logger import logger


class PreparedChat(BaseModel):
    """Conversation ready to send upstream, plus how it was localized."""

    messages: list[ChatMessage]
    match: MatchResult


def parse_chat_request(body: Any) -> ChatRequest:
    """Validate a decoded JSON body.

    Raises:
        InvalidRequestBodyError: If the body is not an object or a field has
            the wrong shape
        MissingMessageError: If ``message`` is absent, not a string, or blank
    """
    if not isinstance(body, dict):
        raise InvalidRequestBodyError()

    message = body.get("message")
    if not isinstance(message, str) or not message.strip():
        raise MissingMessageError()

    try:
        return ChatRequest.model_validate(body)
    except ValidationError as e:
        raise InvalidRequestBodyError(details=str(e)) from e


class ClimateChatService:
    """Service for localized climate risk chat."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        groq_settings: GroqSettings | None = None,
        provider: AIProvider | None = None,
        repository: NeighborhoodRepository | None = None,
        strategy: ResponseStrategy | None = None,
    ):
        """Initialize the chat service.

        Args:
            settings: Application settings; defaults to the environment
            groq_settings: Groq settings used for the credential check
            provider: Completion provider; defaults to the shared provider,
                resolved on first use
            repository: Neighborhood store; defaults to the configured file
            strategy: Response strategy; defaults to the configured mode
        """
        self.settings = settings or get_app_settings()
        self.groq_settings = groq_settings or get_groq_settings()
        self._provider = provider
        self.repository = repository or NeighborhoodRepository(
            self.settings.neighborhoods_path
        )
        self.strategy = strategy or create_response_strategy(
            self.settings.response_mode
        )

    @property
    def provider(self) -> AIProvider:
        if self._provider is None:
            self._provider = get_ai_provider()
        return self._provider

    def prepare(self, request: ChatRequest) -> PreparedChat:
        """Match the message and build the two-message conversation.

        Raises:
            MissingCredentialError: If no Groq API key is configured
            DataUnavailableError: If the neighborhood dataset cannot be loaded
        """
        if not self.groq_settings.api_key:
            logger.error("[CHAT] Groq API key not set")
            raise MissingCredentialError()

        try:
            neighborhoods = self.repository.load()
        except NeighborhoodDataError as e:
            raise DataUnavailableError() from e

        match = find_best_match(request.message, neighborhoods)
        neighborhood = match.neighborhood
        logger.info(
            "[CHAT] Neighborhood match",
            best_candidate=match.record.name if match.record else None,
            score=round(match.score, 3),
            matched=neighborhood is not None,
        )

        system_prompt = build_system_prompt(self.settings.prompt_template, neighborhood)
        return PreparedChat(
            messages=[
                ChatMessage(role="system", content=system_prompt),
                ChatMessage(role="user", content=request.message),
            ],
            match=match,
        )

    async def respond(self, request: ChatRequest) -> Response:
        """Answer one chat request with the configured strategy.

        Raises:
            ChatError: Any pipeline failure, carrying its HTTP status
        """
        prepared = self.prepare(request)
        neighborhood = prepared.match.neighborhood
        location = neighborhood.location if neighborhood else None
        return await self.strategy.respond(self.provider, prepared.messages, location)
