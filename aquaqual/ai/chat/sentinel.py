"""Structured result line embedded at the end of a streamed reply.

The streaming endpoint sends plain text. After the last model token it writes
one line that starts with ``{"parsed":`` and holds the same envelope the
buffered endpoint returns, so a client can recover the location.
"""

import json

from pydantic import ValidationError

from aquaqual.ai.chat.constants import SENTINEL_PREFIX
from aquaqual.ai.chat.schemas import ChatResponse, ParsedChatResponse


def format_sentinel(parsed: ParsedChatResponse) -> str:
    """Render the sentinel line, newline-delimited on both sides."""
    line = ChatResponse(parsed=parsed).model_dump_json()
    return f"\n{line}\n"


def parse_sentinel(text: str) -> ParsedChatResponse | None:
    """Extract the structured result from streamed text.

    Only the last sentinel line is read, since model text may itself contain
    lines that look like one.

    Returns:
        The parsed envelope from the last sentinel line, or None when the
        text has no sentinel or that line is not a valid envelope
    """
    for line in reversed(text.split("\n")):
        if not line.startswith(SENTINEL_PREFIX):
            continue
        try:
            return ChatResponse.model_validate(json.loads(line)).parsed
        except (json.JSONDecodeError, ValidationError):
            return None
    return None
