"""Async chat session against the AquaQual chat API."""

import uuid
from collections.abc import Callable

import httpx

from aquaqual.ai.base import ChatMessage
from aquaqual.ai.chat.constants import APOLOGY_MESSAGE
from aquaqual.ai.chat.schemas import ChatResponse, ParsedChatResponse
from aquaqual.ai.chat.sentinel import parse_sentinel
from aquaqual.client.map_view import MapView
from aquaqual.utils.logger import logger

CHAT_ENDPOINT = "/api/chat"


class SessionBusyError(Exception):
    """Raised when a message is submitted while another is still in flight."""


class ChatRequestError(Exception):
    """Raised internally when the API answers with an error status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"API request failed with status {status_code}")
        self.status_code = status_code


class ChatSession:
    """Conversation with the chat API plus the map it drives.

    The session owns the ordered history and allows one request at a time.
    Streamed replies are appended to a placeholder assistant turn as they
    arrive; once the body ends, a sentinel line (or a JSON envelope from the
    buffered endpoint) replaces the placeholder with the cleaned answer and
    moves the map to the returned location.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8080",
        session_id: str | None = None,
        map_view: MapView | None = None,
        timeout: float = 120.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the chat session.

        Args:
            base_url: Server base URL
            session_id: Identifier sent with every request; random if omitted
            map_view: Map state to update; a Miami-centred view if omitted
            timeout: Request timeout in seconds
            transport: Optional httpx transport, e.g. for tests
        """
        self.base_url = base_url
        self.session_id = session_id or uuid.uuid4().hex[:8]
        self.map_view = map_view or MapView()
        self.history: list[ChatMessage] = []
        self.is_loading = False
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure HTTP client is initialized."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers={"Content-Type": "application/json"},
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "ChatSession":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def submit(
        self,
        message: str,
        on_chunk: Callable[[str], None] | None = None,
    ) -> ChatMessage | None:
        """Send a message and record the reply in the history.

        Args:
            message: User's question; blank input is ignored
            on_chunk: Called with each streamed text chunk as it arrives

        Returns:
            The assistant turn, or None if the message was blank

        Raises:
            SessionBusyError: If a previous submit has not finished
        """
        if not message.strip():
            return None
        if self.is_loading:
            raise SessionBusyError("A message is already being answered")

        self.is_loading = True
        prior_history = [turn.model_dump() for turn in self.history]
        self.history.append(ChatMessage(role="user", content=message))
        reply = ChatMessage(role="assistant", content="")
        self.history.append(reply)

        try:
            client = await self._ensure_client()
            payload = {
                "message": message,
                "sessionId": self.session_id,
                "history": prior_history,
            }
            async with client.stream("POST", CHAT_ENDPOINT, json=payload) as response:
                if response.is_error:
                    raise ChatRequestError(response.status_code)

                content_type = response.headers.get("content-type", "")
                if content_type.startswith("application/json"):
                    await response.aread()
                    parsed = ChatResponse.model_validate(response.json()).parsed
                else:
                    async for chunk in response.aiter_text():
                        reply.content += chunk
                        if on_chunk:
                            on_chunk(chunk)
                    parsed = parse_sentinel(reply.content)

            if parsed is not None:
                self._apply(reply, parsed)
            else:
                logger.debug("[CLIENT] No structured result, keeping raw content")

        except (httpx.HTTPError, ChatRequestError, ValueError) as e:
            logger.error(
                "[CLIENT] Chat request failed",
                session_id=self.session_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            reply.content = APOLOGY_MESSAGE
        finally:
            self.is_loading = False

        return reply

    def _apply(self, reply: ChatMessage, parsed: ParsedChatResponse) -> None:
        reply.content = parsed.response
        if parsed.location is not None:
            self.map_view.focus(parsed.location)
