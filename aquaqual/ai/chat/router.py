"""FastAPI router for the climate chat endpoint."""

import json
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from aquaqual.ai.chat.exceptions import InvalidRequestBodyError
from aquaqual.ai.chat.schemas import ChatResponse, ErrorResponse
from aquaqual.ai.chat.service import ClimateChatService, parse_chat_request
from aquaqual.utils.logger import logger

router = APIRouter(tags=["Chat"])


# Singleton service instance
_chat_service: ClimateChatService | None = None


def get_chat_service() -> ClimateChatService:
    """
    Get or create the chat service singleton.

    Returns:
        ClimateChatService: The chat service instance
    """
    global _chat_service
    if _chat_service is None:
        _chat_service = ClimateChatService()
        logger.info(
            "Initialized ClimateChatService",
            response_mode=_chat_service.settings.response_mode.value,
            prompt_template=_chat_service.settings.prompt_template.value,
        )
    return _chat_service


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat(
    request: Request,
    chat_service: Annotated[ClimateChatService, Depends(get_chat_service)],
) -> Response:
    """
    Answer a climate risk question, localized to a neighborhood when one matches.

    The body is read manually so malformed JSON is reported as a 400 with the
    chat error format instead of FastAPI's validation envelope. Depending on
    configuration the answer is a JSON envelope or a plain-text stream.

    Args:
        request: Raw HTTP request with ``{message, sessionId, history?}``
        chat_service: Chat service dependency

    Returns:
        Response: JSON ``{"parsed": {...}}`` or a streamed text body
    """
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error("[CHAT] Invalid JSON in request body", error=str(e))
        raise InvalidRequestBodyError() from e

    chat_request = parse_chat_request(body)
    logger.info(
        "[USER_INPUT]",
        session_id=chat_request.session_id,
        input=chat_request.message,
        history_length=len(chat_request.history),
    )

    return await chat_service.respond(chat_request)
