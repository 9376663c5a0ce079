"""
Unit tests for GroqProvider.

The OpenAI-compatible SDK client is replaced with mocks, so no network calls
are made.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from aquaqual.ai.base import ChatMessage
from aquaqual.ai.groq.config import GroqSettings
from aquaqual.ai.groq.exceptions import GroqAuthenticationError, GroqCompletionError
from aquaqual.ai.providers.factory import (
    AIProviderType,
    create_ai_provider,
    get_ai_provider,
    set_ai_provider,
)
from aquaqual.ai.providers.groq import GroqProvider

MESSAGES = [
    ChatMessage(role="system", content="You are a climate specialist."),
    ChatMessage(role="user", content="Is Key Biscayne safe in a hurricane?"),
]


@pytest.fixture
def settings():
    return GroqSettings(api_key="test-groq-key", _env_file=None)


@pytest.fixture
def mock_client():
    client = MagicMock()
    client.chat.completions.create = AsyncMock()
    return client


@pytest.fixture
def provider(settings, mock_client):
    provider = GroqProvider(settings=settings)
    provider._client = mock_client
    return provider


def completion(content: str | None, finish_reason: str = "stop"):
    return SimpleNamespace(
        choices=[
            SimpleNamespace(
                message=SimpleNamespace(content=content),
                finish_reason=finish_reason,
            )
        ],
        usage=None,
    )


def stream_event(content: str | None, finish_reason: str | None = None):
    return SimpleNamespace(
        choices=[
            SimpleNamespace(
                delta=SimpleNamespace(content=content),
                finish_reason=finish_reason,
            )
        ]
    )


async def event_stream(*events):
    for event in events:
        yield event


@pytest.mark.asyncio
async def test_generate_chat_sends_fixed_parameters(provider, mock_client):
    mock_client.chat.completions.create.return_value = completion("Evacuate early.")

    result = await provider.generate_chat(MESSAGES)

    assert result.text == "Evacuate early."
    assert result.finish_reason == "stop"
    mock_client.chat.completions.create.assert_awaited_once_with(
        model="openai/gpt-oss-120b",
        messages=[
            {"role": "system", "content": "You are a climate specialist."},
            {"role": "user", "content": "Is Key Biscayne safe in a hurricane?"},
        ],
        temperature=0.7,
        max_tokens=4096,
        top_p=0.9,
        frequency_penalty=0.1,
    )


@pytest.mark.asyncio
async def test_generate_chat_with_no_content_returns_empty_text(provider, mock_client):
    mock_client.chat.completions.create.return_value = completion(None)

    result = await provider.generate_chat(MESSAGES)

    assert result.text == ""


@pytest.mark.asyncio
async def test_generate_chat_wraps_api_errors(provider, mock_client):
    mock_client.chat.completions.create.side_effect = RuntimeError("429 Too Many Requests")

    with pytest.raises(GroqCompletionError) as exc_info:
        await provider.generate_chat(MESSAGES)

    assert exc_info.value.message == "429 Too Many Requests"
    assert isinstance(exc_info.value.original_error, RuntimeError)


@pytest.mark.asyncio
async def test_stream_chat_yields_content_deltas(provider, mock_client):
    mock_client.chat.completions.create.return_value = event_stream(
        SimpleNamespace(choices=[]),
        stream_event("Key "),
        stream_event(None),
        stream_event("Biscayne"),
        stream_event(None, finish_reason="stop"),
    )

    chunks = [chunk async for chunk in provider.stream_chat(MESSAGES)]

    assert [chunk.content for chunk in chunks] == ["Key ", "Biscayne", ""]
    assert chunks[-1].finish_reason == "stop"
    assert mock_client.chat.completions.create.await_args.kwargs["stream"] is True


@pytest.mark.asyncio
async def test_stream_chat_wraps_api_errors(provider, mock_client):
    mock_client.chat.completions.create.side_effect = RuntimeError("upstream down")

    with pytest.raises(GroqCompletionError):
        async for _ in provider.stream_chat(MESSAGES):
            pass


@pytest.mark.asyncio
async def test_missing_api_key_fails_before_any_call():
    provider = GroqProvider(settings=GroqSettings(api_key=None, _env_file=None))

    with pytest.raises(GroqAuthenticationError):
        await provider.generate_chat(MESSAGES)


def test_client_targets_groq_endpoint(settings):
    client = GroqProvider(settings=settings)._get_client()

    assert "api.groq.com" in str(client.base_url)


def test_factory_creates_groq_provider():
    assert isinstance(create_ai_provider(AIProviderType.GROQ), GroqProvider)
    assert isinstance(create_ai_provider("groq"), GroqProvider)
    with pytest.raises(ValueError):
        create_ai_provider("unknown")


def test_shared_provider_is_created_once(provider):
    set_ai_provider(None)
    try:
        first = get_ai_provider()
        assert get_ai_provider() is first

        set_ai_provider(provider)
        assert get_ai_provider() is provider
    finally:
        set_ai_provider(None)
