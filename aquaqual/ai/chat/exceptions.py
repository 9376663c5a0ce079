"""Exceptions raised by the chat pipeline.

Each carries the HTTP status and the error body returned to the caller.
"""

from http import HTTPStatus

from aquaqual.ai.chat.constants import (
    CHAT_FAILED_ERROR,
    DATA_ERROR,
    EMPTY_RESPONSE_ERROR,
    INVALID_BODY_ERROR,
    MISSING_API_KEY_ERROR,
    MISSING_MESSAGE_ERROR,
)
from aquaqual.ai.chat.schemas import ErrorResponse


class ChatError(Exception):
    """Base exception for chat request failures."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR
    default_message: str = CHAT_FAILED_ERROR

    def __init__(self, message: str | None = None, details: str | None = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(error=self.message, details=self.details)


class InvalidRequestBodyError(ChatError):
    """Body is not a JSON object or its fields have the wrong shape."""

    status_code = HTTPStatus.BAD_REQUEST
    default_message = INVALID_BODY_ERROR


class MissingMessageError(ChatError):
    """Message is absent, not a string, or blank."""

    status_code = HTTPStatus.BAD_REQUEST
    default_message = MISSING_MESSAGE_ERROR


class MissingCredentialError(ChatError):
    default_message = MISSING_API_KEY_ERROR


class DataUnavailableError(ChatError):
    default_message = DATA_ERROR


class EmptyCompletionError(ChatError):
    default_message = EMPTY_RESPONSE_ERROR


class UpstreamError(ChatError):
    """The completion API call failed; ``details`` holds its message."""

    default_message = CHAT_FAILED_ERROR
