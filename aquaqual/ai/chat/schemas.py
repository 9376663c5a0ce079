"""Request and response models for the chat endpoint."""

from pydantic import BaseModel, ConfigDict, Field

from aquaqual.ai.base import ChatMessage
from aquaqual.neighborhoods.schemas import LocationHint


class ChatRequest(BaseModel):
    """Chat request body.

    ``message`` is checked before this model is validated so that a missing
    message gets its own error; the remaining fields are validated here.
    """

    model_config = ConfigDict(populate_by_name=True)

    message: str
    session_id: str | None = Field(default=None, alias="sessionId")
    history: list[ChatMessage] = Field(default_factory=list)


class ParsedChatResponse(BaseModel):
    """Cleaned model answer plus the location to focus the map on."""

    response: str
    location: LocationHint | None = None


class ChatResponse(BaseModel):
    """Envelope returned by the buffered chat endpoint."""

    parsed: ParsedChatResponse


class ErrorResponse(BaseModel):
    """Error body returned for every failed chat request."""

    error: str
    details: str | None = None
